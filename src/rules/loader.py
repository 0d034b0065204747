from pathlib import Path

import yaml
from pydantic import ValidationError

from src.components.search.models import SearchConfig
from src.components.table_view.models import DisplayConfig
from src.rules.models import Rules


def _strip_fence(content: str) -> str:
    """Return the first ```yaml block if the file has one, else the whole text."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_fence(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def search_config(rules: Rules) -> SearchConfig:
    return SearchConfig(
        threshold=rules.search.threshold,
        ignore_case=rules.search.ignore_case,
        min_query_length=rules.search.min_query_length,
    )


def display_config(rules: Rules) -> DisplayConfig:
    return DisplayConfig(
        date_format=rules.display.date_format,
        missing_date_label=rules.display.missing_date_label,
    )
