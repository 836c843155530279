"""
Output formatting for acroform-fields.

Generates JSON and text listings of a form's fields.
"""

from __future__ import annotations

import json
from pathlib import Path

from acroform.model.field import (
    CheckBoxState,
    ComboBoxState,
    FieldState,
    ListBoxState,
    RadioState,
    TextState,
)
from acroform.model.form import Form


def format_json(path: Path, form: Form) -> str:
    output = {
        "path": str(path),
        "field_count": form.field_count,
        "fields": [
            {"index": index, "name": form.name_of(index), **form.state_of(index).to_dict()}
            for index in range(form.field_count)
        ],
    }
    return json.dumps(output, indent=2)


def format_text(path: Path, form: Form) -> str:
    lines = [f"{path.name}: {form.field_count} field(s)"]
    for index in range(form.field_count):
        state = form.state_of(index)
        name = form.name_of(index) or "<unnamed>"
        lines.append(f"  [{index}] {name} ({state.field_type.value}) {_describe(state)}".rstrip())
    return "\n".join(lines)


def _describe(state: FieldState) -> str:
    if isinstance(state, TextState):
        return repr(state.text)
    if isinstance(state, CheckBoxState):
        return "checked" if state.is_checked else "unchecked"
    if isinstance(state, RadioState):
        return f"{state.selected!r} of {state.options}"
    if isinstance(state, ListBoxState):
        suffix = " multiselect" if state.multiselect else ""
        return f"{state.selected} of {state.options}{suffix}"
    if isinstance(state, ComboBoxState):
        suffix = " editable" if state.editable else ""
        return f"{state.selected} of {state.options}{suffix}"
    return ""
