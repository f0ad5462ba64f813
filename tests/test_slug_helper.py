import re

import pytest

from shared.helpers.slug_helper import allocate_slug, build_public_url, slugify


class TestSlugify:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My Cool App!", "my-cool-app"),
            ("  Hello   World  ", "hello-world"),
            ("Café Olé", "cafe-ole"),
            ("already-a-slug", "already-a-slug"),
            ("A/B Testing & More", "a-b-testing-more"),
            ("Version 2.0", "version-2-0"),
        ],
    )
    def test_normalizes_names(self, name, expected):
        assert slugify(name) == expected

    def test_punctuation_only_gives_empty(self):
        assert slugify("!!! ???") == ""

    def test_output_is_url_safe(self):
        assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slugify("Ünïcödé *Name* (beta)"))


class TestAllocateSlug:
    def test_free_base_is_used_as_is(self):
        assert allocate_slug("My Cool App!", lambda slug: False) == "my-cool-app"

    def test_probes_suffixes_in_increasing_order(self):
        taken = {"my-cool-app", "my-cool-app-1", "my-cool-app-2"}
        probed = []

        def is_taken(slug):
            probed.append(slug)
            return slug in taken

        assert allocate_slug("My Cool App!", is_taken) == "my-cool-app-3"
        assert probed == ["my-cool-app", "my-cool-app-1", "my-cool-app-2", "my-cool-app-3"]

    def test_repeated_allocation_gives_distinct_slugs(self):
        taken = set()
        for _ in range(6):
            taken.add(allocate_slug("Launch Day", taken.__contains__))

        assert len(taken) == 6
        assert all(re.fullmatch(r"launch-day(-[0-9]+)?", slug) for slug in taken)

    def test_empty_base_falls_back(self):
        assert allocate_slug("???", lambda slug: False) == "space"
        assert allocate_slug("???", {"space"}.__contains__) == "space-1"


def test_build_public_url_joins_prefix_and_slug():
    assert build_public_url("/t/", "my-cool-app") == "/t/my-cool-app"
    assert build_public_url("/t", "my-cool-app") == "/t/my-cool-app"
