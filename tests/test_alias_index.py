"""Unit tests for the exercise catalog and alias index."""
import pytest

from workout_notation.catalog import (
    EXERCISES_DATABASE,
    AliasIndex,
    CatalogError,
    ExerciseCategory,
    default_alias_index,
)

from conftest import make_definition


class TestAliasIndexBuild:
    """Registration and validation."""

    def test_registers_canonical_display_and_alias_names(self):
        definition = make_definition(
            "bench", "Bench press",
            aliases=("bp", "flat bench"),
            display_name="Bench Press (Barbell)",
            display_name_local="Жим лёжа",
        )
        index = AliasIndex.build([definition])

        for name in ("Bench press", "bench press (barbell)", "ЖИМ ЛЁЖА", "BP", "flat bench"):
            assert index.lookup(name) is definition

    def test_lookup_is_case_insensitive_and_whitespace_tolerant(self, mini_index):
        assert mini_index.lookup("  BACK   squat ").id == "squat"

    def test_lookup_miss_returns_none(self, mini_index):
        assert mini_index.lookup("deadlift") is None

    def test_alias_collision_last_definition_wins(self):
        first = make_definition("first", "First", aliases=("shared", "only first"))
        second = make_definition("second", "Second", aliases=("shared",))
        index = AliasIndex.build([first, second])

        assert index.lookup("shared").id == "second"
        assert index.lookup("only first").id == "first"

    def test_collision_keeps_original_iteration_position(self):
        first = make_definition("first", "First", aliases=("shared",))
        second = make_definition("second", "Second")
        index = AliasIndex.build([first, second])
        keys = index.aliases()

        assert keys.index("shared") < keys.index("second")

    def test_duplicate_id_fails_fast(self):
        with pytest.raises(CatalogError, match="Duplicate exercise id"):
            AliasIndex.build([make_definition("x", "One"), make_definition("x", "Two")])

    def test_blank_id_fails_fast(self):
        with pytest.raises(CatalogError):
            AliasIndex.build([make_definition(" ", "One")])

    def test_blank_canonical_name_fails_fast(self):
        with pytest.raises(CatalogError):
            AliasIndex.build([make_definition("x", "  ")])

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestDefaultCatalog:
    """The bundled exercise database."""

    def test_bundled_catalog_builds(self):
        index = default_alias_index()
        assert len(index.definitions) == len(EXERCISES_DATABASE)
        assert len(index) > len(EXERCISES_DATABASE)

    def test_default_index_is_shared(self):
        assert default_alias_index() is default_alias_index()

    def test_definitions_are_immutable(self):
        definition = EXERCISES_DATABASE[0]
        with pytest.raises(Exception):
            definition.canonical_name = "changed"

    def test_russian_alias(self):
        assert default_alias_index().lookup("подтягивания").canonical_name == "Chinup pullup"


class TestCatalogHelpers:
    """Lookup helpers exposed by the index."""

    def test_get_by_canonical_name(self, mini_index):
        assert mini_index.get_by_canonical_name("push-UPS").id == "pushups"
        assert mini_index.get_by_canonical_name("pushups") is None

    def test_get_by_category(self, mini_index):
        legs = mini_index.get_by_category(ExerciseCategory.LEGS)
        assert [d.id for d in legs] == ["squat"]
        assert [d.id for d in mini_index.get_by_category("chest")] == ["bench", "pushups"]

    def test_search_matches_alias_substring(self, mini_index):
        assert [d.id for d in mini_index.search("push")] == ["pushups"]

    def test_search_matches_local_name(self, mini_index):
        assert [d.id for d in mini_index.search("лежа")] == ["bench"]

    def test_search_respects_limit(self):
        results = default_alias_index().search("curl", limit=2)
        assert len(results) == 2

    def test_search_blank_query(self, mini_index):
        assert mini_index.search("   ") == []

    def test_search_results_are_unique(self):
        results = default_alias_index().search("press", limit=50)
        ids = [d.id for d in results]
        assert len(ids) == len(set(ids))
