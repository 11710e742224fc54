"""Rich-text editor delta output.

Produces the ``{"ops": [...]}`` structure used by Quill-style editors,
with each style's editor attributes attached to its inserts.
"""

import json
from collections.abc import Sequence
from typing import Optional

from stylify.formats.base import OutputFormat
from stylify.formatting.ir import Content, Style


class DeltaFormat(OutputFormat):
    """Render text as editor insert operations.

    Args:
        reverse: Attach each style's reverse attributes instead, giving
            the operations that clear the styling again
    """

    def __init__(self, reverse: bool = False, indent: Optional[int] = None) -> None:
        self.reverse = reverse
        self.indent = indent

    @property
    def name(self) -> str:
        return "delta"

    def render_plain(self, text: str, key: int) -> dict:
        return {"insert": text}

    def wrap(self, style: Style, content: Content) -> dict:
        if isinstance(content, dict):
            op = {"insert": content["insert"], "attributes": dict(content.get("attributes", {}))}
        else:
            op = {"insert": str(content), "attributes": {}}
        attrs = style.editor_attrs_reverse if self.reverse else style.editor_attrs
        # Inner styles win over outer ones.
        for attr, value in attrs.items():
            op["attributes"].setdefault(attr, value)
        if not op["attributes"]:
            del op["attributes"]
        return op

    def ops(self, units: Sequence[Content]) -> list[dict]:
        """Normalize units to operations, merging adjacent plain inserts."""
        ops: list[dict] = []
        for unit in units:
            op = unit if isinstance(unit, dict) else {"insert": str(unit)}
            if ops and "attributes" not in op and "attributes" not in ops[-1]:
                ops[-1] = {"insert": ops[-1]["insert"] + op["insert"]}
            else:
                ops.append(op)
        return ops

    def finish(self, units: Sequence[Content]) -> str:
        return json.dumps({"ops": self.ops(units)}, indent=self.indent, ensure_ascii=False)
