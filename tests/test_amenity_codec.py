import random
import unittest

from listing_admin.core.amenity_catalog import AMENITIES, CUSTOM_FALLBACK_ICONS
from listing_admin.core.amenity_codec import (
    add_selections,
    amenities_to_text,
    build_custom_id,
    count_by_category,
    decode_amenities,
    encode_amenities,
    parse_custom_id,
    repair_amenities,
    toggle_category,
    toggle_selection,
)


def _structure(groups):
    return [
        (group["category"], group["categoryEn"], [(item["_id"], item["name"], item["nameHe"]) for item in group["items"]])
        for group in groups
    ]


class AmenityEncodeTests(unittest.TestCase):
    def test_groups_follow_catalog_category_order(self):
        output = encode_amenities(["security-247", "gym", "swimming-pool"])
        self.assertEqual([group["categoryEn"] for group in output], ["Pools & Water", "Fitness & Gym", "Security & Access"])
        self.assertEqual(output[0]["category"], "בריכות ומים")
        self.assertEqual(
            output[1]["items"],
            [{"icon": "dumbbell", "name": "State-of-the-Art Gym", "nameHe": "חדר כושר מתקדם", "_id": "gym"}],
        )

    def test_custom_entries_land_in_views_with_rotating_icons(self):
        ids = [f"custom:שם {index}|Name {index}" for index in range(22)]
        output = encode_amenities(ids)
        self.assertEqual(len(output), 1)
        self.assertEqual(output[0]["categoryEn"], "Views & Status")
        icons = [item["icon"] for item in output[0]["items"]]
        self.assertEqual(icons[:20], list(CUSTOM_FALLBACK_ICONS))
        self.assertEqual(icons[20:], ["rocket", "gem"])
        self.assertEqual(output[0]["items"][3]["name"], "Name 3")
        self.assertEqual(output[0]["items"][3]["nameHe"], "שם 3")

    def test_custom_icon_depends_on_encounter_order(self):
        first = encode_amenities(["custom:א|A", "custom:ב|B"])[0]["items"]
        swapped = encode_amenities(["custom:ב|B", "custom:א|A"])[0]["items"]
        self.assertEqual(first[0]["icon"], "rocket")
        self.assertEqual(swapped[1]["icon"], "gem")
        self.assertEqual(swapped[1]["_id"], "custom:א|A")

    def test_unknown_catalog_id_is_dropped_and_reported(self):
        dropped = []
        output = encode_amenities(["gym", "retired-amenity"], on_drop=dropped.append)
        self.assertEqual(len(output), 1)
        self.assertEqual(dropped, ["retired-amenity"])

    def test_malformed_custom_id_emits_empty_names(self):
        output = encode_amenities(["custom:no-separator"])
        item = output[0]["items"][0]
        self.assertEqual(item["nameHe"], "")
        self.assertEqual(item["name"], "")
        self.assertEqual(item["_id"], "custom:no-separator")

    def test_custom_name_falls_back_to_hebrew(self):
        item = encode_amenities(["custom:מרפסת|"])[0]["items"][0]
        self.assertEqual(item["name"], "מרפסת")
        self.assertEqual(item["nameHe"], "מרפסת")

    def test_non_list_input_yields_empty_output(self):
        for value in (None, "gym", 5, {"gym": True}):
            self.assertEqual(encode_amenities(value), [])


class AmenityDecodeTests(unittest.TestCase):
    def test_stored_ids_are_used_verbatim_and_deduplicated(self):
        persisted = [
            {"category": "x", "items": [{"name": "whatever", "nameHe": "", "_id": "gym"}]},
            {"category": "y", "items": [{"name": "again", "nameHe": "", "_id": "gym"}, {"_id": "custom:א|A"}]},
        ]
        self.assertEqual(decode_amenities(persisted), ["gym", "custom:א|A"])

    def test_legacy_items_match_catalog_by_name(self):
        persisted = [
            {
                "category": "general",
                "items": [
                    {"icon": "check", "name": "Swimming Pool", "nameHe": "Swimming Pool"},
                    {"icon": "check", "name": "", "nameHe": "חדר כושר מתקדם"},
                ],
            }
        ]
        self.assertEqual(decode_amenities(persisted), ["swimming-pool", "gym"])

    def test_raw_catalog_id_in_name_is_recognized(self):
        persisted = [{"items": [{"name": "bbq-area", "nameHe": "bbq-area"}]}]
        self.assertEqual(decode_amenities(persisted), ["bbq-area"])

    def test_comma_joined_ids_are_repaired(self):
        persisted = [
            {"category": "general", "items": [{"name": "swimming-pool,gym,security-247", "nameHe": "..."}]}
        ]
        self.assertEqual(decode_amenities(persisted), ["swimming-pool", "gym", "security-247"])

        same_field = [{"items": [{"name": "swimming-pool, gym", "nameHe": "swimming-pool, gym"}]}]
        self.assertEqual(decode_amenities(same_field), ["swimming-pool", "gym"])

    def test_partial_comma_match_stays_custom(self):
        persisted = [{"items": [{"name": "gym,rooftop observatory dome", "nameHe": "gym,rooftop observatory dome"}]}]
        self.assertEqual(decode_amenities(persisted), ["custom:gym,rooftop observatory dome|gym,rooftop observatory dome"])

    def test_unknown_names_become_custom_ids(self):
        persisted = [{"items": [{"name": "Meteorite Museum", "nameHe": "מוזיאון מטאוריטים"}, {"name": "Rooftop Farm"}]}]
        self.assertEqual(
            decode_amenities(persisted),
            ["custom:מוזיאון מטאוריטים|Meteorite Museum", "custom:Rooftop Farm|Rooftop Farm"],
        )

    def test_legacy_name_with_separator_keeps_english_name(self):
        persisted = [{"items": [{"name": "Sauna | Steam", "nameHe": "סאונה | אדים"}]}]
        selection_id = decode_amenities(persisted)[0]
        self.assertEqual(selection_id, "custom:סאונה / אדים|Sauna | Steam")
        self.assertEqual(parse_custom_id(selection_id), ("סאונה / אדים", "Sauna | Steam"))

        item = encode_amenities([selection_id])[0]["items"][0]
        self.assertEqual(item["name"], "Sauna | Steam")
        self.assertEqual(decode_amenities([{"items": [item]}]), [selection_id])

    def test_malformed_input_never_raises(self):
        samples = [
            None,
            "",
            "pool",
            42,
            {},
            {"items": [{"name": "Swimming Pool"}]},
            [None, 3, "x", {"items": None}, {"items": "gym"}, {"items": [None, 1, {"name": 7}, {}]}],
            [{"items": [{"_id": 12, "name": "Swimming Pool"}]}],
        ]
        for sample in samples:
            result = decode_amenities(sample)
            self.assertIsInstance(result, list)
        self.assertEqual(decode_amenities(samples[-1]), ["swimming-pool"])


class AmenityRoundTripTests(unittest.TestCase):
    def test_catalog_subsets_round_trip_as_sets(self):
        all_ids = [amenity.id for amenity in AMENITIES]
        self.assertEqual(set(decode_amenities(encode_amenities(all_ids))), set(all_ids))

        rng = random.Random(7)
        for _ in range(25):
            subset = rng.sample(all_ids, rng.randint(1, 15))
            self.assertEqual(set(decode_amenities(encode_amenities(subset))), set(subset))

    def test_custom_ids_round_trip_exactly(self):
        for custom_id in ("custom:מוזיאון|Meteorite Museum", "custom:א|", "custom:|Only English", "custom:a|b|c", "custom:x"):
            self.assertEqual(decode_amenities(encode_amenities([custom_id])), [custom_id])

    def test_repair_is_idempotent(self):
        legacy = [
            {"category": "general", "items": [{"name": "swimming-pool,gym", "nameHe": "swimming-pool,gym"}]},
            {"category": "general", "items": [{"name": "Meteorite Museum", "nameHe": "מוזיאון"}, {"name": "24/7 Security"}]},
        ]
        once = repair_amenities(legacy)
        twice = repair_amenities(once)
        self.assertEqual(_structure(once), _structure(twice))
        self.assertEqual(once, twice)

    def test_repair_returns_none_without_ids(self):
        self.assertIsNone(repair_amenities(None))
        self.assertIsNone(repair_amenities([]))
        self.assertIsNone(repair_amenities([{"items": [{"name": ""}]}]))


class CustomIdTests(unittest.TestCase):
    def test_build_custom_id(self):
        self.assertEqual(build_custom_id("  מוזיאון ", " Meteorite Museum "), "custom:מוזיאון|Meteorite Museum")
        self.assertEqual(build_custom_id("מוזיאון"), "custom:מוזיאון|מוזיאון")
        self.assertIsNone(build_custom_id("   ", "Meteorite Museum"))
        self.assertEqual(build_custom_id("א|ב"), "custom:א/ב|א|ב")

    def test_parse_custom_id(self):
        self.assertEqual(parse_custom_id("custom:מוזיאון|Meteorite Museum"), ("מוזיאון", "Meteorite Museum"))
        self.assertEqual(parse_custom_id("custom:a|b|c"), ("a", "b|c"))
        self.assertEqual(parse_custom_id("custom:missing"), ("", ""))


class SelectionHelperTests(unittest.TestCase):
    def test_toggle_selection_keeps_set_semantics(self):
        ids = toggle_selection(["gym"], "swimming-pool")
        self.assertEqual(ids, ["gym", "swimming-pool"])
        self.assertEqual(toggle_selection(ids, "gym"), ["swimming-pool"])
        self.assertEqual(add_selections(["gym"], ["gym", "bbq-area"]), ["gym", "bbq-area"])

    def test_toggle_category_selects_then_clears(self):
        pool_ids = [amenity.id for amenity in AMENITIES if amenity.category == "pools"]
        selected = toggle_category(["gym"], "pools")
        self.assertEqual(selected, ["gym", *pool_ids])
        self.assertEqual(toggle_category(selected, "pools"), ["gym"])

    def test_count_by_category_counts_custom_under_views(self):
        counts = count_by_category(["gym", "swimming-pool", "custom:א|A", "retired"])
        self.assertEqual(counts["fitness"], 1)
        self.assertEqual(counts["pools"], 1)
        self.assertEqual(counts["views"], 1)

    def test_amenities_to_text_handles_legacy_shapes(self):
        self.assertEqual(amenities_to_text({"items": [{"name": "Pool"}, {"nameHe": "בריכה"}]}), "Pool\nבריכה")
        self.assertEqual(amenities_to_text(["Gym", {"name": "Spa"}]), "Gym\nSpa")
        self.assertEqual(amenities_to_text(encode_amenities(["gym"])), "State-of-the-Art Gym")
        self.assertEqual(amenities_to_text(None), "")


if __name__ == "__main__":
    unittest.main()
