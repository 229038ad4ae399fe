"""
API tests — what the form sees over HTTP.

Tests:
1-3. Health + presets endpoints
4-10. /api/resolve — camelCase body, junk input, presets, custom sizes, huge values, conflicts
11.   /api/sample
"""


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "paperbulk"}


def test_list_presets(client):
    resp = client.get("/api/presets/")
    assert resp.status_code == 200
    presets = {p["key"]: p for p in resp.json()}
    assert len(presets) == 7
    assert presets["cover"]["width_in"] == 20.0
    assert presets["cover"]["height_in"] == 26.0
    assert presets["custom"]["width_in"] is None


def test_get_preset_and_unknown(client):
    resp = client.get("/api/presets/coated-gloss")
    assert resp.status_code == 200
    assert resp.json()["height_in"] == 38.0

    resp = client.get("/api/presets/newsprint")
    assert resp.status_code == 404
    assert "newsprint" in resp.json()["detail"]


def test_resolve_camel_case_body(client):
    """160 μm + bulk 1.30 on the default 25×38 basis."""
    resp = client.post("/api/resolve", json={"thicknessMicron": 160, "bulk": 1.30})
    assert resp.status_code == 200
    data = resp.json()

    m = data["measurements"]
    assert abs(m["basis_weight"] - 123.077) < 0.001
    assert m["thickness_mm"] == 0.16
    assert m["thickness_tiao"] == 16
    assert abs(m["pound_weight"] - 83.13) < 0.1

    assert data["reference"] == {"preset": "woodfree-A", "width_in": 25.0, "height_in": 38.0}
    assert data["reference_area_sq_in"] == 950.0
    assert data["display"]["basis_weight"] == 123.08
    assert data["display"]["density"] == 0.769
    assert data["conflicts"] == []


def test_resolve_ignores_junk_values(client):
    """Unparseable fields are just absent — never a 422."""
    resp = client.post("/api/resolve", json={
        "poundWeight": "eighty",
        "basisWeight": "1,28",
        "bulk": "",
        "thicknessMm": None,
    })
    assert resp.status_code == 200
    m = resp.json()["measurements"]
    assert m["basis_weight"] == 128.0
    assert m["bulk"] is None
    assert m["thickness_micron"] is None
    assert abs(m["pound_weight"] - 86.49) < 0.1


def test_resolve_with_preset_and_custom_size(client):
    cover = client.post("/api/resolve", json={"poundWeight": 65, "preset": "cover"}).json()
    assert cover["reference_area_sq_in"] == 520.0
    assert abs(cover["measurements"]["basis_weight"] - 175.77) < 0.05

    custom = client.post("/api/resolve", json={
        "poundWeight": 65, "preset": "custom", "widthIn": "20", "heightIn": 26,
    }).json()
    assert custom["reference"]["preset"] == "custom"
    assert custom["measurements"]["basis_weight"] == cover["measurements"]["basis_weight"]


def test_resolve_degenerate_size_skips_pound_weight(client):
    resp = client.post("/api/resolve", json={
        "poundWeight": 80, "thicknessTiao": 16, "preset": "custom", "widthIn": 0, "heightIn": 38,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["reference_area_sq_in"] == 0.0
    assert data["measurements"]["basis_weight"] is None
    assert data["measurements"]["thickness_micron"] == 160.0


def test_resolve_huge_basis_weight_does_not_crash(client):
    """Values near the float limit survive display rounding."""
    resp = client.post("/api/resolve", json={"basisWeight": 1e308, "bulk": 1e-300})
    assert resp.status_code == 200
    data = resp.json()
    assert data["measurements"]["basis_weight"] == 1e308
    assert data["measurements"]["pound_weight"] is None
    assert data["display"]["basis_weight"] == 1e308


def test_resolve_negative_sides_skip_pound_weight(client):
    resp = client.post("/api/resolve", json={
        "poundWeight": 80, "preset": "custom", "widthIn": -25, "heightIn": -38,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["reference_area_sq_in"] == 950.0
    assert data["measurements"]["basis_weight"] is None


def test_resolve_unknown_preset_and_bad_body(client):
    resp = client.post("/api/resolve", json={"bulk": 1.3, "preset": "newsprint"})
    assert resp.status_code == 404

    resp = client.post("/api/resolve", json=[1, 2, 3])
    assert resp.status_code == 422


def test_resolve_reports_conflicts(client):
    resp = client.post("/api/resolve", json={"thicknessMicron": 160, "thicknessMm": 0.2})
    data = resp.json()
    assert data["measurements"]["thickness_mm"] == 0.2
    assert {c["name"] for c in data["conflicts"]} == {"thickness_micron", "thickness_mm"}


def test_sample(client):
    """80 lb woodfree + bulk 1.35."""
    resp = client.get("/api/sample")
    assert resp.status_code == 200
    display = resp.json()["display"]
    assert display["pound_weight"] == 80.0
    assert display["basis_weight"] == 118.41
    assert display["bulk"] == 1.35
    assert display["thickness_mm"] == 0.16
