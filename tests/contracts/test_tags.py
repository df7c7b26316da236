from __future__ import annotations


def test_tags_are_normalized(openapi_spec):
    allowed = {"health", "flying-star"}
    for path, methods in openapi_spec.get("paths", {}).items():
        for method, op in methods.items():
            if not isinstance(op, dict):
                continue
            tags = set(op.get("tags", []))
            assert tags, f"Missing tags for {path} {method}"
            assert tags <= allowed, f"Unexpected tags {tags - allowed} on {path} {method}"


def test_flying_star_router_has_problem_docs(openapi_spec):
    op = openapi_spec["paths"]["/api/v1/flying-star/chart"]["post"]
    responses = op.get("responses", {})
    # Router-level defaults apply
    assert "500" in responses
    assert "422" in responses
