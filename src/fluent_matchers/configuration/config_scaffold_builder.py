"""Check document scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CHECK_FILENAME = "check.yaml"

_CHECK_SCAFFOLD_TEMPLATE = """# Check document template for fluent-matchers.
# Run it with: fluent-matchers check --expectations check.yaml

expectations:
  # One of: str, int, float, bool, any. sorted: true needs an ordered type.
  item_type: str
  # Expected number of items. Must not be less than the number of items below.
  # size: 3
  # No items beyond those listed under items.
  exactly: false
  # Items appear in the order listed under items.
  ordered: false
  # Items appear in ascending natural order.
  sorted: false
  # No two items are equal.
  unique: false
  # Expected item values. Each needs at least one equal actual item.
  items:
    - "<REQUIRED>"

# Observed items. May be omitted when passed with --actual.
actual:
  - "<REQUIRED>"

symbols:
  # default (Unicode decorated) or ascii.
  preset: default
  # overrides:
  #   left_bracket: "<OPTIONAL>"
"""


def build_placeholder_check_document() -> str:
    """Build a YAML check document template with placeholders and inline guidance."""
    return _CHECK_SCAFFOLD_TEMPLATE


def write_placeholder_check_document(output_path: Path | str) -> Path:
    """Write the placeholder check document to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Check document already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_check_document(), encoding="utf-8")
    return destination.resolve()
