from __future__ import annotations


class DeclarationWriter:
    """Append-only sink for generated declarations, joined with newlines."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, content: str) -> None:
        self._chunks.append(content)

    def write_block(self, content: str) -> None:
        if content.strip():
            self.write(content.rstrip("\n") + "\n")

    def write_interface(
        self,
        name: str,
        fields: list[str],
        *,
        doc: str = "",
        discriminant: str | None = None,
    ) -> None:
        if doc:
            self.write(doc)
        self.write(f"export interface {name} {{")
        if discriminant is not None:
            self.write(f"type: {discriminant};")
        for field_text in fields:
            self.write(field_text)
        self.write("}\n")

    def write_alias(self, name: str, type_expr: str, *, exported: bool = False) -> None:
        keyword = "export type" if exported else "type"
        self.write(f"{keyword} {name} = {type_expr};")

    def text(self) -> str:
        return "\n".join(self._chunks).rstrip("\n") + "\n"
