"""Tests for the export, preset and health endpoints."""

import base64

from tests.unit.conftest import words

PDF_PREFIX = "data:application/pdf;base64,"


def story_payload(pages, **config_overrides):
    config = {
        "children": ["Emma", "Sam"],
        "story_type": "Adventure",
        "setting": "Enchanted forest",
        "characters": ["Friendly dog"],
        "reading_level": "Early 4–5",
        "page_size": "A5 portrait",
        "content_safety": True,
        "theme_preset": "Calm pastels",
        "dedication": "For Grandma",
    }
    config.update(config_overrides)
    return {"config": config, "pages": pages}


READY_PAGES = [
    {"page_number": 1, "text": words(100), "image_url": "https://img.example/1.png"},
    {"page_number": 2, "text": words(90), "image_locked": True},
]


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestValidateExport:
    """Tests for POST /exports/validate."""

    def test_ready_book(self, client):
        response = client.post("/exports/validate", json=story_payload(READY_PAGES))

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["errors"] == []
        assert [p["export_ready"] for p in data["pages"]] == [True, True]
        assert data["config_errors"] == []

    def test_blank_story_type_is_reported(self, client):
        response = client.post(
            "/exports/validate", json=story_payload(READY_PAGES, story_type="  ")
        )

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["config_errors"] == [
            {"field": "storyType", "message": "Story type is required"}
        ]

    def test_setup_form_rules_reported(self, client):
        payload = story_payload(
            READY_PAGES,
            characters=[],
            length_pages=25,
            theme_preset=None,
        )

        data = client.post("/exports/validate", json=payload).json()

        assert [e["field"] for e in data["config_errors"]] == [
            "characters",
            "lengthPages",
            "theme",
        ]

    def test_page_status_fields(self, client):
        pages = [{"page_number": 1, "text": words(65)}]

        response = client.post("/exports/validate", json=story_payload(pages))

        page = response.json()["pages"][0]
        assert page["word_count"] == 65
        assert page["status"] == "low"
        assert page["is_valid"] is True
        assert page["text_state"] == "drafted"
        assert page["image_state"] == "no-image"
        assert page["export_ready"] is False

    def test_missing_image_error(self, client):
        pages = [
            {"page_number": 1, "text": words(100), "image_url": "a.png"},
            {"page_number": 2, "text": words(100)},
            {"page_number": 3, "text": words(100), "image_url": "c.png"},
        ]

        response = client.post("/exports/validate", json=story_payload(pages))

        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"] == [
            {"field": "page2Image", "message": "Page 2 needs an image or must be locked without one"}
        ]

    def test_accepts_page_alias(self, client):
        pages = [{"page": 4, "text": words(100), "image_locked": True}]

        response = client.post("/exports/validate", json=story_payload(pages))

        assert response.status_code == 200
        assert response.json()["pages"][0]["page_number"] == 4

    def test_unknown_reading_level_falls_back(self, client):
        """Unknown levels are treated as Early 4-5 (80-120 words)."""
        pages = [{"page_number": 1, "text": words(64), "image_locked": True}]

        response = client.post(
            "/exports/validate", json=story_payload(pages, reading_level="Grown-up")
        )

        assert response.status_code == 200
        assert response.json()["errors"][0]["message"] == (
            "Page 1 has too few words (64). Target: 80-120 words."
        )

    def test_null_text_is_empty(self, client):
        pages = [{"page_number": 1, "text": None, "image_locked": True}]

        response = client.post("/exports/validate", json=story_payload(pages))

        assert response.json()["pages"][0]["text_state"] == "needs-text"

    def test_rejects_non_positive_page_number(self, client):
        pages = [{"page_number": 0, "text": "hi"}]

        response = client.post("/exports/validate", json=story_payload(pages))

        assert response.status_code == 422


class TestExportPdf:
    """Tests for POST /exports/pdf."""

    def test_returns_both_pdfs(self, client):
        response = client.post("/exports/pdf", json=story_payload(READY_PAGES))

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        for key in ("web_pdf_url", "print_pdf_url"):
            assert data[key].startswith(PDF_PREFIX)
            assert base64.b64decode(data[key][len(PDF_PREFIX):]).startswith(b"%PDF")
        assert data["web_filename"] == "Emma-Sam-web.pdf"
        assert data["print_filename"] == "Emma-Sam-print.pdf"
        assert data["page_count"] == 3

    def test_dimensions_for_square_book(self, client):
        response = client.post(
            "/exports/pdf", json=story_payload(READY_PAGES, page_size="210×210 mm square")
        )

        assert response.json()["dimensions"] == {
            "content": {"width_mm": 210, "height_mm": 210},
            "with_bleed": {"width_mm": 216, "height_mm": 216},
        }

    def test_unknown_page_size_falls_back_to_a5(self, client):
        response = client.post("/exports/pdf", json=story_payload(READY_PAGES, page_size="B5"))

        assert response.json()["dimensions"]["content"] == {"width_mm": 148, "height_mm": 210}

    def test_invalid_book_returns_422(self, client):
        pages = [{"page_number": 1, "text": "too short"}]

        response = client.post("/exports/pdf", json=story_payload(pages))

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["message"] == "Book is not ready to export"
        assert [e["field"] for e in detail["errors"]] == ["page1Text", "page1Image"]

    def test_validation_can_be_disabled(self, client):
        payload = story_payload([{"page_number": 1, "text": "too short"}])
        payload["enforce_validation"] = False

        response = client.post("/exports/pdf", json=payload)

        assert response.status_code == 200
        assert response.json()["page_count"] == 2

    def test_no_children_uses_default_filename(self, client):
        response = client.post("/exports/pdf", json=story_payload(READY_PAGES, children=[]))

        assert response.json()["web_filename"] == "story-web.pdf"

    def test_zero_pages_is_cover_only(self, client):
        response = client.post("/exports/pdf", json=story_payload([]))

        assert response.status_code == 200
        assert response.json()["page_count"] == 1


class TestPresets:
    """Tests for GET /presets."""

    def test_lists_catalogues(self, client):
        response = client.get("/presets/")

        assert response.status_code == 200
        data = response.json()
        assert len(data["themes"]) == 5
        assert len(data["story_types"]) == 6
        assert len(data["characters"]) == 10
        assert len(data["settings"]) == 10
        assert data["themes"][0]["name"] == "Calm pastels"

    def test_lists_reading_levels_and_sizes(self, client):
        data = client.get("/presets/").json()

        assert data["reading_levels"] == [
            {"name": "Toddler 2–3", "min_words": 60, "max_words": 80, "tolerance": 15},
            {"name": "Early 4–5", "min_words": 80, "max_words": 120, "tolerance": 15},
            {"name": "Primary 6–8", "min_words": 120, "max_words": 150, "tolerance": 15},
        ]
        assert [s["name"] for s in data["page_sizes"]] == [
            "A5 portrait",
            "A4 portrait",
            "210×210 mm square",
        ]

    def test_get_theme_by_name(self, client):
        response = client.get("/presets/themes/Ocean breeze")

        assert response.status_code == 200
        data = response.json()
        assert data["palette"] == ["#0FB9B1", "#3742FA", "#70A1FF", "#7BED9F", "#FF9F43"]
        assert "calm" in data["mood"]

    def test_get_story_type_character_and_setting(self, client):
        story_type = client.get("/presets/story-types/Bedtime").json()
        character = client.get("/presets/characters/Wise owl").json()
        setting = client.get("/presets/settings/Library corner").json()

        assert story_type["description"] == "Gentle, calming stories for sleep time"
        assert character["description"] == "A helpful guide with knowledge to share"
        assert setting["description"] == "A quiet nook surrounded by books"

    def test_unknown_preset_returns_404(self, client):
        response = client.get("/presets/themes/Neon noir")

        assert response.status_code == 404
        assert response.json()["detail"] == "Unknown theme preset"
