import pytest

from pathtree.matching.path_patterns import PathPatternRules


@pytest.fixture
def rules():
    return PathPatternRules(
        [
            "# comments are ignored",
            "*.txt",
            "!important.txt",
            "build/",
            "*.py[cod]",
            "**/__pycache__/",
        ]
    )


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("src/file.pyc", True),
        ("build/", True),
        ("build/output.bin", True),
        ("src/build/", True),
        ("build", False),
        ("src/__pycache__/", True),
        ("home/users/arthur/answer.txt", True),
        ("home/users/arthur/", False),
    ],
)
def test_matches(rules, path, expected):
    assert rules.matches(path) == expected


def test_empty_rules_match_nothing():
    rules = PathPatternRules()
    assert not rules.matches("anything")
    assert not rules.matches("dir/")


def test_add_pattern():
    rules = PathPatternRules()
    rules.add_pattern("*.log")
    assert rules.matches("var/app.log")
    assert not rules.matches("var/app.txt")

    rules.add_pattern("!keep.log")
    assert not rules.matches("var/keep.log")


def test_anchored_pattern():
    rules = PathPatternRules(["/home/*/arthur/"])
    assert rules.matches("home/users/arthur/")
    assert rules.matches("home/users/arthur/answer.txt")
    assert not rules.matches("srv/home/users/arthur/")


def test_add_pattern_keeps_lines_in_order():
    rules = PathPatternRules(["*.txt"])
    rules.add_pattern("!answer.txt")
    rules.add_pattern("answer.txt")

    assert rules.lines == ["*.txt", "!answer.txt", "answer.txt"]
    assert rules.matches("home/answer.txt")
    assert rules.matches("home/notes.txt")
