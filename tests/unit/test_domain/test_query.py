"""Tests for the filter and sort engine."""


def _names(result):
    return [repo.display_name for repo in result.items]


def test_derive_default_sorts_by_name(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [make_repo("gamma"), make_repo("Alpha"), make_repo("beta")]

    result = derive(mirror, ViewState())

    assert _names(result) == ["Alpha", "beta", "gamma"]
    assert result.excluded_count == 0


def test_derive_name_descending(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [make_repo("gamma"), make_repo("Alpha"), make_repo("beta")]

    result = derive(mirror, ViewState(sort_direction="descending"))

    assert _names(result) == ["gamma", "beta", "Alpha"]


def test_name_sort_ignores_accents():
    from repocleaner.domain.query import name_sort_key

    names = ["zeta", "Émile", "eagle"]

    assert sorted(names, key=name_sort_key) == ["eagle", "Émile", "zeta"]


def test_derive_does_not_mutate_inputs(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [make_repo("b"), make_repo("a")]
    snapshot = list(mirror)

    derive(mirror, ViewState(search_text="a"))

    assert mirror == snapshot


def test_derive_is_idempotent(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [make_repo("b", stargazers_count=3), make_repo("a", stargazers_count=3)]
    state = ViewState(sort_key="popularity_score", sort_direction="descending")

    assert derive(mirror, state) == derive(mirror, state)


def test_search_matches_name_description_and_language(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [
        make_repo("toolkit", description="CLI helpers"),
        make_repo("website", description="Personal site", language="TypeScript"),
        make_repo("dotfiles", description=None, language="Shell"),
    ]

    assert _names(derive(mirror, ViewState(search_text="TOOL"))) == ["toolkit"]
    assert _names(derive(mirror, ViewState(search_text="cli"))) == ["toolkit"]
    assert _names(derive(mirror, ViewState(search_text="typescript"))) == ["website"]
    assert _names(derive(mirror, ViewState(search_text="  "))) == [
        "dotfiles",
        "toolkit",
        "website",
    ]


def test_filters_count_exclusions_per_stage(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [
        make_repo("public-source"),
        make_repo("private-source", private=True),
        make_repo("public-fork", fork=True),
        make_repo("private-fork", private=True, fork=True, language="Go"),
    ]

    result = derive(
        mirror,
        ViewState(visibility_filter="private", derivation_filter="derived", language_filter="Go"),
    )

    assert _names(result) == ["private-fork"]
    assert result.excluded == {
        "search": 0,
        "visibility": 2,
        "derivation": 1,
        "language": 0,
    }
    assert result.total_count + result.excluded_count == len(mirror)


def test_original_filter(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [make_repo("source"), make_repo("fork", fork=True)]

    assert _names(derive(mirror, ViewState(derivation_filter="original"))) == ["source"]


def test_sort_by_last_modified(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [
        make_repo("old", updated_at="2023-01-01T00:00:00Z"),
        make_repo("new", updated_at="2024-06-01T00:00:00Z"),
    ]

    result = derive(mirror, ViewState(sort_key="last_modified_at", sort_direction="descending"))

    assert _names(result) == ["new", "old"]


def test_sort_ties_keep_mirror_order(make_repo):
    from repocleaner.domain.query import derive
    from repocleaner.domain.view_state import ViewState

    mirror = [
        make_repo("first", forks_count=1),
        make_repo("second", forks_count=1),
        make_repo("third", forks_count=5),
    ]

    ascending = derive(mirror, ViewState(sort_key="derivation_count"))
    descending = derive(
        mirror, ViewState(sort_key="derivation_count", sort_direction="descending")
    )

    assert _names(ascending) == ["first", "second", "third"]
    assert _names(descending) == ["third", "first", "second"]


def test_available_languages(make_repo):
    from repocleaner.domain.query import available_languages

    mirror = [
        make_repo("a", language="Python"),
        make_repo("b", language="Go"),
        make_repo("c", language=None),
        make_repo("d", language="Python"),
    ]

    assert available_languages(mirror) == ["Go", "Python"]


def test_excluded_counts_follow_filter_order():
    from repocleaner.domain.query import FILTER_STAGES, derive
    from repocleaner.domain.view_state import ViewState

    result = derive([], ViewState())

    assert tuple(result.excluded) == FILTER_STAGES
