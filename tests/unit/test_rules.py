from pathlib import Path

import pytest

from src.rules.loader import display_config, load_rules, search_config

MINIMAL = """
project:
  slug: test
  rules_version: "0.1"
rbac:
  default_role: viewer
  resources:
    subscribers: [view]
  roles:
    viewer:
      subscribers: [view]
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(text)
    return path


def test_real_rules_load(rules):
    assert rules.project.slug == "admin-table-state"
    assert rules.search.threshold == 0.3
    assert rules.rbac.default_role == "viewer"
    assert rules.dashboard.trailing_days == 7


def test_defaults_fill_optional_sections(tmp_path):
    rules = load_rules(write(tmp_path, MINIMAL))
    assert rules.search.scorer == "edit_distance"
    assert rules.display.missing_date_label == "N/A"
    assert rules.dashboard.statuses == ["published", "draft", "scheduled"]


def test_fenced_yaml_is_extracted(tmp_path):
    rules = load_rules(write(tmp_path, f"# Rules\n\n```yaml\n{MINIMAL}\n```\n\nNotes.\n"))
    assert rules.project.slug == "test"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_rules(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_rules(write(tmp_path, "project: [unclosed"))


def test_unknown_default_role(tmp_path):
    with pytest.raises(ValueError, match="default_role"):
        load_rules(write(tmp_path, MINIMAL.replace("default_role: viewer", "default_role: ghost")))


def test_undeclared_action(tmp_path):
    text = MINIMAL.replace("      subscribers: [view]", "      subscribers: [view, purge]")
    with pytest.raises(ValueError, match="purge"):
        load_rules(write(tmp_path, text))


def test_threshold_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        load_rules(write(tmp_path, MINIMAL + "search:\n  threshold: 1.5\n"))


def test_dashboard_statuses_lowercased(tmp_path):
    rules = load_rules(write(tmp_path, MINIMAL + "dashboard:\n  statuses: [Published]\n"))
    assert rules.dashboard.statuses == ["published"]


def test_config_projections(rules):
    cfg = search_config(rules)
    assert cfg.threshold == 0.3
    assert cfg.ignore_case is True
    assert display_config(rules).missing_date_label == "N/A"
