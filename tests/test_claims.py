from vipps_login import ClaimSet


def test_repeated_claims_keep_order():
    claims = ClaimSet([("a", "1"), ("b", "2"), ("a", "3")])
    assert claims.first("a") == "1"
    assert claims.find_all("a") == ["1", "3"]
    assert claims.find_all("missing") == []
    assert len(claims) == 3
    assert "b" in claims
    assert "c" not in claims


def test_find_first_uses_priority_order():
    claims = ClaimSet([("legacy", "old"), ("modern", "new")])
    assert claims.find_first("modern", "legacy") == "new"
    assert claims.find_first("missing", "legacy") == "old"
    assert claims.find_first("missing") is None


def test_from_mapping_and_merge():
    claims = ClaimSet.from_mapping({"iss": "https://api.vipps.no/", "other_addresses": ["x", "y"]})
    assert claims.find_all("other_addresses") == ["x", "y"]

    merged = claims.merge(ClaimSet([("email", "ola@example.com")]))
    assert merged.first("email") == "ola@example.com"
    assert "email" not in claims
    assert merged == ClaimSet.from_mapping(
        {
            "iss": "https://api.vipps.no/",
            "other_addresses": ["x", "y"],
            "email": "ola@example.com",
        }
    )
