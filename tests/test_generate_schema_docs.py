import json
import tempfile
import unittest
from pathlib import Path

from scripts import generate_schema_docs


class GenerateSchemaDocsTest(unittest.TestCase):
    def test_generates_markdown_from_contracts(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            repo_root = Path(tmpdir)
            contracts_dir = repo_root / generate_schema_docs.CONTRACTS_REL
            contracts_dir.mkdir(parents=True)

            def write_schema(name: str, title: str) -> None:
                (contracts_dir / name).write_text(
                    json.dumps(
                        {
                            "$schema": "https://json-schema.org/draft/2020-12/schema",
                            "$id": f"https://example.test/{name}",
                            "title": title,
                            "description": f"{title} description",
                            "type": "object",
                            "properties": {
                                "traces": {"type": "object", "description": "a|b"}
                            },
                            "required": ["traces"],
                        }
                    ),
                    encoding="utf-8",
                )

            write_schema("plot-schema.v1.json", "Plot Schema")
            write_schema("result.schema.v1.json", "Result Schema")

            generate_schema_docs.generate(repo_root)

            out = (repo_root / "docs" / "reference" / "plot-schema.v1.md").read_text(
                encoding="utf-8"
            )
            self.assertIn("Generated file. Do not edit directly.", out)
            self.assertIn("# Plot Schema", out)
            self.assertIn("| `traces` | `object` | yes | a\\|b |", out)
            self.assertTrue(
                (repo_root / "docs" / "reference" / "result.schema.v1.md").exists()
            )

    def test_missing_contract_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(SystemExit):
                generate_schema_docs.generate(Path(tmpdir))

    def test_bundled_contracts_render(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            repo_root = Path(tmpdir)
            source = generate_schema_docs.REPO_ROOT / generate_schema_docs.CONTRACTS_REL
            target = repo_root / generate_schema_docs.CONTRACTS_REL
            target.mkdir(parents=True)
            for name in generate_schema_docs.SCHEMA_MAP:
                (target / name).write_text(
                    (source / name).read_text(encoding="utf-8"), encoding="utf-8"
                )

            generate_schema_docs.generate(repo_root)

            out = (repo_root / "docs" / "reference" / "result.schema.v1.md").read_text(
                encoding="utf-8"
            )
            self.assertIn("`exit_code`", out)


if __name__ == "__main__":
    unittest.main()
