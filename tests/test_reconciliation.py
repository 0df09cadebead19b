import unittest

from listing_admin.core.amenity_codec import encode_amenities
from listing_admin.core.reconciliation import (
    build_snapshot,
    form_to_project,
    highlights_to_text,
    parse_highlights_text,
    project_to_form,
    resolve_field,
    text_changed,
)


def _legacy_record(**overrides):
    record = {
        "description": "<p>Beachfront tower</p>",
        "priceCurrency": "AED",
        "highlights": [
            {"icon": "trending-up", "title": "ROI", "titleHe": "תשואה", "value": "8%"},
            {"title": "Beachfront"},
        ],
        "amenities": [
            {
                "category": "general",
                "items": [{"icon": "check", "name": "swimming-pool,gym", "nameHe": "swimming-pool,gym"}],
            }
        ],
        "paymentPlan": "60/40 flexible",
        "faqs": [{"question": "Freehold?", "answer": "Yes."}],
        "neighborhood": {"description": "Near the marina", "nearbyPlaces": [{"name": "Marina Mall", "distance": "5 min"}]},
        "units": None,
        "floorPlans": [{"name": "A1", "image": "https://cdn.example.com/a1.png", "size": "80 sqm"}],
    }
    record.update(overrides)
    return record


def _load(record):
    form = project_to_form(record)
    return form, build_snapshot(record, form)


class ProjectToFormTests(unittest.TestCase):
    def test_legacy_record_is_decoded_into_editable_state(self):
        form = project_to_form(_legacy_record())
        self.assertEqual(form["amenityIds"], ["swimming-pool", "gym"])
        self.assertEqual(form["amenitiesText"], "swimming-pool,gym")
        self.assertEqual(form["highlightsText"], "[trending-up] ROI (8%)\nBeachfront")
        self.assertEqual(form["highlights"][1], {"icon": "star", "title": "Beachfront", "titleHe": "Beachfront", "value": ""})
        self.assertEqual(form["paymentPlanText"], "60/40 flexible")
        self.assertEqual(form["paymentPlans"], [])
        self.assertEqual(form["neighborhood"]["nearbyPlaces"][0]["type"], "landmark")
        self.assertEqual(form["units"], [])

    def test_non_text_highlight_values_are_kept(self):
        form = project_to_form(_legacy_record(highlights=[{"title": "Pet friendly", "value": True}, {"title": "Floors", "value": 42}]))
        self.assertEqual([h["value"] for h in form["highlights"]], ["true", "42"])
        self.assertEqual(form["highlightsText"], "Pet friendly (true)\nFloors (42)")

    def test_garbage_record_yields_empty_form(self):
        for value in (None, "x", [], {"highlights": "oops", "units": {"a": 1}, "faqs": [None]}):
            form = project_to_form(value)
            self.assertEqual(form["highlights"], [])
            self.assertEqual(form["amenityIds"], [])
            self.assertEqual(form["paymentPlans"], [])

    def test_snapshot_captures_raw_groups_and_texts(self):
        record = _legacy_record()
        form, snapshot = _load(record)
        self.assertIs(snapshot["paymentPlan"], record["paymentPlan"])
        self.assertEqual(snapshot["amenities"], record["amenities"])
        self.assertEqual(snapshot["highlightsText"], form["highlightsText"])


class FormToProjectTests(unittest.TestCase):
    def test_untouched_save_keeps_text_payment_plan_and_repairs_amenities(self):
        record = _legacy_record()
        form, snapshot = _load(record)
        saved = form_to_project(form, snapshot)

        self.assertEqual(saved["paymentPlan"], "60/40 flexible")
        self.assertEqual(saved["amenities"], encode_amenities(["swimming-pool", "gym"]))
        self.assertEqual(saved["highlights"][0], {"icon": "trending-up", "title": "ROI", "titleHe": "תשואה", "value": "8%"})
        self.assertEqual(saved["faqs"], [{"question": "Freehold?", "answer": "Yes."}])
        self.assertIsNone(saved["units"])
        self.assertEqual(saved["floorPlans"][0]["name"], "A1")
        self.assertEqual(saved["description"], "<p>Beachfront tower</p>")

    def test_unrepresentable_payment_plan_is_preserved_verbatim(self):
        odd_plan = {"name": "Custom", "milestones": [{"step": 1}]}
        form, snapshot = _load(_legacy_record(paymentPlan=odd_plan))
        self.assertEqual(form["paymentPlans"], [])
        self.assertIs(form_to_project(form, snapshot)["paymentPlan"], odd_plan)

    def test_structured_payment_plans_win_over_text(self):
        form, snapshot = _load(_legacy_record())
        form["paymentPlanText"] = "edited text"
        form["paymentPlans"] = [{"name": "60/40", "milestones": [{"title": "Booking", "percentage": 60}]}]
        saved = form_to_project(form, snapshot)
        self.assertEqual(saved["paymentPlan"][0]["name"], "60/40")
        self.assertEqual(saved["paymentPlans"][0]["name"], "60/40")

    def test_edited_payment_text_replaces_loaded_value(self):
        form, snapshot = _load(_legacy_record())
        form["paymentPlanText"] = "70/30"
        self.assertEqual(form_to_project(form, snapshot)["paymentPlan"], {"name": "70/30"})
        form["paymentPlanText"] = ""
        self.assertIsNone(form_to_project(form, snapshot)["paymentPlan"])

    def test_highlight_text_fallback_is_parsed(self):
        form, snapshot = _load(_legacy_record())
        form["highlights"] = []
        form["highlightsText"] = "[gem] Waterfront (2 km)\n\nPrivate beach"
        saved = form_to_project(form, snapshot)
        self.assertEqual(
            saved["highlights"],
            [
                {"title": "Waterfront", "titleHe": "Waterfront", "icon": "gem", "value": "2 km"},
                {"title": "Private beach", "titleHe": "Private beach", "icon": "star", "value": ""},
            ],
        )

    def test_blank_structured_highlights_fall_back_to_snapshot(self):
        record = _legacy_record()
        form, snapshot = _load(record)
        form["highlights"] = [{"icon": "star", "title": "  ", "titleHe": "", "value": ""}]
        self.assertIs(form_to_project(form, snapshot)["highlights"], record["highlights"])

    def test_amenity_text_fallback_when_no_ids_selected(self):
        form, snapshot = _load(_legacy_record())
        form["amenityIds"] = []
        form["amenitiesText"] = "Pool\nGym\n"
        saved = form_to_project(form, snapshot)
        self.assertEqual(
            saved["amenities"],
            [
                {
                    "category": "general",
                    "items": [
                        {"icon": "check", "name": "Pool", "nameHe": "Pool"},
                        {"icon": "check", "name": "Gym", "nameHe": "Gym"},
                    ],
                }
            ],
        )

    def test_drifted_amenity_ids_keep_stored_value_and_are_reported(self):
        record = _legacy_record()
        form, snapshot = _load(record)
        form["amenityIds"] = ["retired-amenity"]
        dropped = []
        saved = form_to_project(form, snapshot, on_drop=dropped.append)
        self.assertIs(saved["amenities"], record["amenities"])
        self.assertEqual(dropped, ["retired-amenity"])

    def test_units_are_emitted_with_currency_and_size_unit(self):
        form, snapshot = _load(_legacy_record(units=[{"type": "Old", "sizeFrom": 40}]))
        form["priceCurrency"] = "USD"
        form["units"] = [
            {"type": "", "typeHe": "דירת 2 חדרים", "sizeFrom": "70", "floor": "12"},
            {"type": "", "typeHe": ""},
        ]
        units = form_to_project(form, snapshot)["units"]
        self.assertEqual(len(units), 1)
        self.assertEqual(units[0]["type"], "דירת 2 חדרים")
        self.assertEqual(units[0]["sizeFrom"], 70.0)
        self.assertEqual(units[0]["sizeUnit"], "sqm")
        self.assertEqual(units[0]["priceCurrency"], "USD")
        self.assertEqual(units[0]["floor"], "12")
        self.assertNotIn("view", units[0])

    def test_oversized_unit_numbers_degrade_to_zero(self):
        form = project_to_form(_legacy_record(units=[{"type": "1BR", "sizeFrom": 10**400, "priceFrom": "1e400", "parking": float("inf")}]))
        self.assertEqual(form["units"][0]["sizeFrom"], 0)
        self.assertEqual(form["units"][0]["priceFrom"], 0)

        form, snapshot = _load(_legacy_record())
        form["units"] = [{"type": "1BR", "sizeFrom": 10**400, "sizeTo": 90}]
        units = form_to_project(form, snapshot)["units"]
        self.assertEqual((units[0]["sizeFrom"], units[0]["sizeTo"]), (0, 90))

    def test_whitespace_neighborhood_description_is_written(self):
        form, snapshot = _load(_legacy_record())
        form["neighborhood"] = {"description": "  ", "nearbyPlaces": [{"name": "", "distance": "1 km"}]}
        saved = form_to_project(form, snapshot)
        self.assertEqual(saved["neighborhood"], {"description": "  ", "descriptionEn": None, "nearbyPlaces": []})

    def test_cleared_groups_keep_snapshot_values(self):
        record = _legacy_record()
        form, snapshot = _load(record)
        form["faqs"] = [{"question": "", "answer": ""}]
        form["neighborhood"] = {"description": "", "nearbyPlaces": []}
        form["floorPlans"] = []
        saved = form_to_project(form, snapshot)
        self.assertIs(saved["faqs"], record["faqs"])
        self.assertIs(saved["neighborhood"], record["neighborhood"])
        self.assertIs(saved["floorPlans"], record["floorPlans"])

    def test_new_record_without_snapshot(self):
        saved = form_to_project(
            {
                "description": '<p onclick="x()">Hi</p><script>alert(1)</script>',
                "highlightsText": "  ",
                "amenitiesText": "Pool",
                "paymentPlanText": "",
            },
            None,
        )
        self.assertEqual(saved["description"], "<p>Hi</p>")
        self.assertIsNone(saved["descriptionEn"])
        self.assertIsNone(saved["highlights"])
        self.assertEqual(saved["amenities"][0]["items"][0]["name"], "Pool")
        self.assertIsNone(saved["paymentPlan"])
        self.assertIsNone(saved["paymentPlans"])
        self.assertIsNone(saved["units"])

    def test_garbage_form_never_raises(self):
        samples = (
            None,
            "form",
            [],
            {"highlights": "x", "amenityIds": "gym", "paymentPlans": {"a": 1}, "units": [None]},
            {"units": [float("inf")], "paymentPlans": 10**400, "priceCurrency": 10**400},
        )
        for value in samples:
            saved = form_to_project(value, None)
            self.assertIsNone(saved["highlights"])
            self.assertIsNone(saved["amenities"])
            self.assertIsNone(saved["units"])


class TextHelperTests(unittest.TestCase):
    def test_highlight_text_round_trip(self):
        highlights = [{"icon": "gem", "title": "Waterfront", "value": "2 km"}, {"icon": "star", "title": "Beach"}]
        text = highlights_to_text(highlights)
        self.assertEqual(text, "[gem] Waterfront (2 km)\nBeach")
        parsed = parse_highlights_text(text)
        self.assertEqual([(h["icon"], h["title"], h["value"]) for h in parsed], [("gem", "Waterfront", "2 km"), ("star", "Beach", "")])
        self.assertIsNone(parse_highlights_text("\n  \n"))

    def test_text_changed_with_and_without_snapshot(self):
        self.assertTrue(text_changed({"highlightsText": "a"}, None, "highlightsText"))
        self.assertFalse(text_changed({"highlightsText": "  "}, None, "highlightsText"))
        self.assertFalse(text_changed({"highlightsText": "a"}, {"highlightsText": "a"}, "highlightsText"))
        self.assertTrue(text_changed({"highlightsText": ""}, {"highlightsText": "a"}, "highlightsText"))

    def test_resolve_field_precedence(self):
        snapshot = {"faqs": ["original"]}
        self.assertEqual(resolve_field(["new"], snapshot, "faqs", True, lambda: ["text"]), ["new"])
        self.assertEqual(resolve_field([], snapshot, "faqs", True, lambda: ["text"]), ["text"])
        self.assertEqual(resolve_field([], snapshot, "faqs", False, lambda: ["text"]), ["original"])
        self.assertIsNone(resolve_field(None, None, "faqs"))


if __name__ == "__main__":
    unittest.main()
