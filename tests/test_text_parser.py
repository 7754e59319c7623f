"""End-to-end tests for multi-line workout text parsing."""
import pytest

from workout_notation.parsers import PLACEHOLDER_EXERCISE_NAME, WorkoutTextParser, parse_workout_text


def reps_weights(exercise):
    return [(s.reps, s.weight) for s in exercise.sets]


class TestBasicParsing:

    def test_bench_press_session(self, text_parser):
        workout = text_parser.parse("Bench press\n10x20kg\n10x20\n8x20")

        assert len(workout.exercises) == 1
        bench = workout.exercises[0]
        assert bench.name == "Bench press"
        assert bench.display_name == "Bench Press"
        assert bench.was_normalized is True
        assert reps_weights(bench) == [(10, 20.0), (10, 20.0), (8, 20.0)]
        assert bench.total_volume == 560
        assert workout.total_volume == 560
        assert workout.total_sets == 3

    def test_module_level_entry_point(self):
        workout = parse_workout_text("Deadlift\n5x140kg")
        assert workout.exercises[0].name == "Deadlift"
        assert workout.total_volume == 700

    def test_multiple_exercises_keep_input_order(self, text_parser):
        workout = text_parser.parse("Squat\n5x100\n\nDeadlift\n5x140kg\nPlank\n1m")
        assert [e.name for e in workout.exercises] == ["Squat", "Deadlift", "Plank"]

    def test_name_line_punctuation_is_trimmed(self, text_parser):
        workout = text_parser.parse("- Bench press:\n10x60kg")
        assert workout.exercises[0].name == "Bench press"

    def test_unknown_exercise_keeps_input_text(self, text_parser):
        workout = text_parser.parse("Zercher carry\n20kg x 30")
        exercise = workout.exercises[0]
        assert exercise.name == "Zercher carry"
        assert exercise.was_normalized is False
        assert reps_weights(exercise) == [(30, 20.0)]

    def test_russian_session(self, text_parser):
        workout = text_parser.parse("Жим лежа\n10х60кг\n8х60кг")
        bench = workout.exercises[0]
        assert bench.name == "Bench press"
        assert bench.display_name_local == "Жим лёжа"
        assert reps_weights(bench) == [(10, 60.0), (8, 60.0)]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_blank_text(self, text_parser, text):
        workout = text_parser.parse(text)
        assert workout.exercises == []
        assert workout.total_volume == 0
        assert workout.total_sets == 0


class TestSetLines:

    def test_several_sets_on_one_line(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60kg, 8x60kg; 6x60kg")
        assert reps_weights(workout.exercises[0]) == [(10, 60.0), (8, 60.0), (6, 60.0)]

    def test_decimal_comma_is_not_a_separator(self, text_parser):
        workout = text_parser.parse("Bench press\n22,5x8kg, 22,5x6kg")
        assert reps_weights(workout.exercises[0]) == [(8, 22.5), (6, 22.5)]

    def test_whitespace_separated_durations(self, text_parser):
        workout = text_parser.parse("Plank\n1m 1m")
        plank = workout.exercises[0]
        assert [s.duration_seconds for s in plank.sets] == [60, 60]

    def test_unparseable_fragments_are_dropped(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60 ??? 8x60")
        assert reps_weights(workout.exercises[0]) == [(10, 60.0), (8, 60.0)]

    def test_partly_parseable_line_with_letters_is_a_name(self, text_parser):
        assert text_parser.parse_set_line("Bench press 10x60kg") is None

    def test_only_notation_words_in_failed_fragment(self, text_parser):
        assert text_parser.parse_set_line("1234567x10kg 8x60kg") == text_parser.parse_set_line("8x60kg")
        assert text_parser.parse_set_line("8x60kg foo") is None

    def test_bad_fragment_next_to_unit_words_is_dropped(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60kg ??? 8x60kg")
        assert len(workout.exercises) == 1
        assert reps_weights(workout.exercises[0]) == [(10, 60.0), (8, 60.0)]

    def test_oversized_numbers_do_not_start_an_exercise(self, text_parser):
        workout = text_parser.parse("Push-ups\n" + "9" * 400 + "x3\n12")
        assert [e.name for e in workout.exercises] == ["Push-ups"]
        assert [s.reps for s in workout.exercises[0].sets] == [12]

    def test_several_sides_on_one_line(self, text_parser):
        workout = text_parser.parse("Bench press\n10 left 10 right")
        assert len(workout.exercises) == 1
        assert [(s.reps, s.side) for s in workout.exercises[0].sets] == [(10, "left"), (10, "right")]

    def test_sides_with_weights_on_one_line(self, text_parser):
        workout = text_parser.parse("Lunges\n12x20kg left 12x20kg (right)")
        sets = workout.exercises[0].sets
        assert [(s.reps, s.weight, s.side) for s in sets] == [(12, 20.0, "left"), (12, 20.0, "right")]

    @pytest.mark.parametrize("bullet", ["-", "•", "*", "–"])
    def test_bulleted_set_lines(self, text_parser, bullet):
        workout = text_parser.parse(f"Push-ups\n{bullet} 10 reps\n{bullet}12x3")
        assert [e.name for e in workout.exercises] == ["Push-ups"]
        assert [s.reps for s in workout.exercises[0].sets] == [10, 12, 12, 12]

    def test_line_without_set_data_is_skipped(self, text_parser):
        workout = text_parser.parse("Bench press\n???\n10x60kg")
        assert len(workout.exercises) == 1
        assert workout.total_sets == 1

    def test_sets_before_any_name_get_placeholder(self, text_parser):
        workout = text_parser.parse("10x20kg\n8x20kg\nSquat\n5x100")
        first, second = workout.exercises
        assert first.name == PLACEHOLDER_EXERCISE_NAME
        assert first.was_normalized is False
        assert reps_weights(first) == [(10, 20.0), (8, 20.0)]
        assert second.name == "Squat"

    def test_exercise_without_sets_is_kept(self, text_parser):
        workout = text_parser.parse("Bench press\nSquat\n5x100")
        assert [e.name for e in workout.exercises] == ["Bench press", "Squat"]
        assert workout.exercises[0].sets == []
        assert workout.exercises[0].total_volume == 0

    def test_side_is_recorded(self, text_parser):
        workout = text_parser.parse("Lunges\n12x20kg left\n12x20kg right")
        assert [s.side for s in workout.exercises[0].sets] == ["left", "right"]


class TestInlineSets:

    def test_name_and_sets_on_one_line(self, text_parser):
        workout = text_parser.parse("Plank 3x45sec")
        plank = workout.exercises[0]
        assert plank.name == "Plank"
        assert plank.is_bodyweight is True
        assert len(plank.sets) == 1
        assert plank.sets[0].duration_seconds == 45
        assert plank.sets[0].is_bodyweight is True

    def test_inline_sets_use_exercise_bodyweight_flag(self, text_parser):
        workout = text_parser.parse("Pull-ups 12x3")
        pullups = workout.exercises[0]
        assert pullups.name == "Chinup pullup"
        assert [s.reps for s in pullups.sets] == [12, 12, 12]

    def test_split_inline_sets(self, text_parser):
        assert text_parser.split_inline_sets("Bench press 10x60kg 8x60kg") == (
            "Bench press", "10x60kg 8x60kg",
        )
        assert text_parser.split_inline_sets("Bench press") == ("Bench press", "")


class TestExpansionAndInheritance:

    def test_triple_form_expands(self, text_parser):
        workout = text_parser.parse("Squat\n60x10x3")
        squat = workout.exercises[0]
        assert reps_weights(squat) == [(10, 60.0)] * 3
        assert all(s.set_count is None for s in squat.sets)
        assert squat.total_volume == 1800
        assert workout.total_sets == 3

    def test_bodyweight_context_reads_sets(self, text_parser):
        workout = text_parser.parse("Pull-ups\n12x3")
        sets = workout.exercises[0].sets
        assert len(sets) == 3
        assert all(s.reps == 12 and s.weight is None and s.is_bodyweight for s in sets)
        assert workout.total_volume == 0

    def test_reps_only_inherits_previous_weight(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60kg\n7x\n7x")
        bench = workout.exercises[0]
        assert reps_weights(bench) == [(10, 60.0), (7, 60.0), (7, 60.0)]
        assert bench.total_volume == 600 + 420 + 420

    def test_inheritance_does_not_cross_exercises(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60kg\nSquat\n7x")
        assert reps_weights(workout.exercises[1]) == [(7, None)]

    def test_bodyweight_sets_never_inherit(self, text_parser):
        workout = text_parser.parse("Bench press\n10x60kg\n10")
        bench = workout.exercises[0]
        assert reps_weights(bench) == [(10, 60.0), (10, None)]
        assert bench.total_volume == 600


class TestSupersets:

    def test_superset_groups_until_separator(self, text_parser):
        text = "Superset:\nPull-ups\n10\nDips\n12\n---\nSquat\n5x100"
        workout = text_parser.parse(text)

        assert [e.name for e in workout.exercises] == ["Chinup pullup", "Dips", "Squat"]
        assert [e.superset_group for e in workout.exercises] == [1, 1, None]
        assert reps_weights(workout.exercises[2]) == [(5, 100.0)]

    def test_each_superset_gets_its_own_group(self, text_parser):
        text = "superset\nPull-ups\n10\nDips\n10\nss:\nBench press\n10x60kg\nSquat\n5x100"
        workout = text_parser.parse(text)
        assert [e.superset_group for e in workout.exercises] == [1, 1, 2, 2]

    def test_russian_superset_marker(self, text_parser):
        workout = text_parser.parse("Суперсет:\nПодтягивания\n10\nБрусья\n10")
        assert [e.superset_group for e in workout.exercises] == [1, 1]

    @pytest.mark.parametrize("separator", ["---", "—", "===", "___", "***"])
    def test_separators(self, text_parser, separator):
        workout = text_parser.parse(f"superset:\nDips\n10\n{separator}\nPlank\n1m")
        assert workout.exercises[1].superset_group is None

    def test_separator_outside_superset_is_ignored(self, text_parser):
        workout = text_parser.parse("Dips\n10\n---\nPlank\n1m")
        assert len(workout.exercises) == 2

    def test_marker_detection(self, text_parser):
        assert text_parser.is_superset_marker("SUPERSET:")
        assert text_parser.is_superset_marker("super set")
        assert not text_parser.is_superset_marker("superset of pull-ups")


class TestCustomCatalog:

    def test_parser_over_substitute_catalog(self, mini_index, set_parser):
        parser = WorkoutTextParser(mini_index, set_parser)
        workout = parser.parse("отжимания\n15\nbp\n10x60kg")
        assert [e.name for e in workout.exercises] == ["Push-ups", "Bench press"]
        assert workout.exercises[0].is_bodyweight is True
