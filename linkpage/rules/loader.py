from pathlib import Path

import yaml
from pydantic import ValidationError

from linkpage.rules.models import Rules


def _yaml_body(content: str) -> str:
    """Return the first ```yaml fenced block, or the whole text when there is none."""
    body: list[str] = []
    inside = False
    for line in content.splitlines():
        marker = line.strip()
        if not inside and marker.startswith("```yaml"):
            inside = True
            continue
        if inside and marker.startswith("```"):
            return "\n".join(body)
        if inside:
            body.append(line)
    return "\n".join(body) if inside else content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.

    Raises FileNotFoundError if the file is missing and ValueError if the
    YAML is unreadable, empty or fails the schema.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(_yaml_body(path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules file {path} does not contain a mapping")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
