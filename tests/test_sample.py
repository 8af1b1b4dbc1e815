from __future__ import annotations

import json

from formhtml import sample


def test_sample_renders_text_area() -> None:
    body = sample.main({})["body"]
    assert body.startswith("Configuration: defaults\n")
    assert '<textarea id="why_1" name="FieldValues[Why]">When</textarea>' in body


def test_sample_reads_configuration(tmp_path) -> None:
    path = tmp_path / "formhtml.json"
    path.write_text(json.dumps({"post_array_name": "Verify", "add_unique_id": False}))
    body = sample.main({"config": str(path)})["body"]
    assert '<textarea id="why" name="Verify[Why]">When</textarea>' in body
