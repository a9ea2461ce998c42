from biome_color.voting import CategorySample, dominant, tally


def samples(*names):
    return [CategorySample(name) for name in names]


def test_plurality_wins():
    assert dominant(samples("A", "A", "A", "B", "B")) == "A"
    assert dominant(samples("B", "A", "B", "A", "B")) == "B"


def test_tie_goes_to_first_encountered():
    assert dominant(samples("A", "A", "B", "B")) == "A"
    assert dominant(samples("B", "A", "A", "B")) == "B"
    assert dominant(samples("C", "A", "B")) == "C"


def test_empty_input_has_no_winner():
    assert dominant([]) is None
    assert tally([]) == {}


def test_invalid_samples_are_ignored():
    votes = [CategorySample("water", valid=False)] * 5 + samples("grass", "grass")
    assert tally(votes) == {"grass": 2}
    assert dominant(votes) == "grass"


def test_all_invalid_has_no_winner():
    votes = [CategorySample("water", valid=False), CategorySample("sand", valid=False)]
    assert dominant(votes) is None


def test_hidden_identity_priority():
    assert CategorySample("x").label == "x"
    assert CategorySample("x", hidden="y").label == "y"
    assert CategorySample("x", hidden="y", double_hidden="z").label == "z"
    assert CategorySample("x", double_hidden="z").label == "z"


def test_tally_uses_most_substituted_label():
    votes = [
        CategorySample("concrete", hidden="grass"),
        CategorySample("refined-concrete", hidden="concrete", double_hidden="sand"),
        CategorySample("sand"),
        CategorySample("grass"),
        CategorySample("sand"),
    ]
    assert tally(votes) == {"grass": 2, "sand": 3}
    assert dominant(votes) == "sand"


def test_tally_keeps_encounter_order():
    assert list(tally(samples("c", "a", "b", "a"))) == ["c", "a", "b"]


def test_accepts_generators():
    assert dominant(CategorySample(n) for n in ("x", "y", "y")) == "y"


def test_empty_override_still_counts():
    assert CategorySample("x", hidden="").label == ""
    assert CategorySample("x", hidden="y", double_hidden="").label == ""
    assert tally([CategorySample("x", hidden=""), CategorySample("x")]) == {"": 1, "x": 1}
