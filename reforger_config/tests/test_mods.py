"""
Tests for workshop mod helpers.
"""

import pytest

from ..models.server import Mod
from ..server.mods import (
    WORKSHOP_BASE_URL,
    find_duplicate_mod_ids,
    get_effective_mod_name,
    get_mod_workshop_url,
    is_valid_mod_id,
    mod_from_url,
    mod_id_from_url,
    mod_list_from_urls,
)

MOD_ID = "5965550F24A0C152"


class TestModIds:
    """Mod id validation."""

    @pytest.mark.parametrize("mod_id", [MOD_ID, MOD_ID.lower(), "0123456789ABCDEF"])
    def test_valid_ids(self, mod_id):
        assert is_valid_mod_id(mod_id) is True

    @pytest.mark.parametrize(
        "mod_id",
        ["", "5965550F24A0C15", "5965550F24A0C1521", "5965550F24A0C15G", f"{MOD_ID}\n", f"\n{MOD_ID}", None, 123],
    )
    def test_invalid_ids(self, mod_id):
        assert is_valid_mod_id(mod_id) is False

    def test_effective_name(self):
        assert get_effective_mod_name(Mod(mod_id=MOD_ID, name="Where Am I")) == "Where Am I"
        assert get_effective_mod_name(Mod(mod_id=MOD_ID)) == MOD_ID


class TestWorkshopUrls:
    """Workshop URL building and parsing."""

    def test_url_uses_sanitized_name(self):
        url = get_mod_workshop_url(Mod(mod_id=MOD_ID, name="Where Am I? (v2)"))

        assert url == f"{WORKSHOP_BASE_URL}/{MOD_ID}-WhereAmIv2"

    def test_url_without_name(self):
        assert get_mod_workshop_url(Mod(mod_id=MOD_ID)) == f"{WORKSHOP_BASE_URL}/{MOD_ID}-mod"

    def test_url_name_is_truncated(self):
        url = get_mod_workshop_url(Mod(mod_id=MOD_ID, name="A" * 80))

        assert url.endswith("-" + "A" * 50)

    def test_id_from_url(self):
        assert mod_id_from_url(f"{WORKSHOP_BASE_URL}/{MOD_ID.lower()}-WhereAmI") == MOD_ID

    def test_id_from_url_without_suffix(self):
        assert mod_id_from_url(f"{WORKSHOP_BASE_URL}/{MOD_ID}") == MOD_ID

    @pytest.mark.parametrize("url", ["https://example.com/workshop/5965550F24A0C152", MOD_ID, ""])
    def test_not_a_workshop_url(self, url):
        assert mod_id_from_url(url) is None

    def test_multiline_value_is_not_a_workshop_url(self):
        assert mod_id_from_url(f"{WORKSHOP_BASE_URL}/{MOD_ID}-WhereAmI\n{WORKSHOP_BASE_URL}/{MOD_ID}") is None

    def test_mod_from_url(self):
        mod = mod_from_url(f"{WORKSHOP_BASE_URL}/{MOD_ID}-WhereAmI")

        assert mod.mod_id == MOD_ID
        assert mod.name == "WhereAmI"

    def test_mod_list_from_urls_skips_other_values(self):
        mods = mod_list_from_urls([f"{WORKSHOP_BASE_URL}/{MOD_ID}-WhereAmI", "https://example.com", ""])

        assert [mod.mod_id for mod in mods] == [MOD_ID]


class TestDuplicates:
    """Duplicate id detection."""

    def test_duplicates_in_order_of_second_occurrence(self):
        mods = [Mod(mod_id="A" * 16), Mod(mod_id="B" * 16), Mod(mod_id="B" * 16), Mod(mod_id="A" * 16)]

        assert find_duplicate_mod_ids(mods) == ["B" * 16, "A" * 16]

    def test_repeated_duplicate_listed_once(self):
        mods = [Mod(mod_id=MOD_ID)] * 3

        assert find_duplicate_mod_ids(mods) == [MOD_ID]

    def test_no_duplicates(self):
        assert find_duplicate_mod_ids([Mod(mod_id=MOD_ID)]) == []
