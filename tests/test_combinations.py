from datewise import Component, ComponentKind, FormatTag
from datewise.engine import generate_combinations

Y = Component(ComponentKind.YEAR, 2023, FormatTag.Y)
M = Component(ComponentKind.MONTH, 5, FormatTag.M2)
D = Component(ComponentKind.DAY, 5, FormatTag.D2)


def test_empty_input_yields_nothing() -> None:
    assert generate_combinations([]) == []


def test_empty_candidate_list_yields_nothing() -> None:
    assert generate_combinations([[Y], []]) == []


def test_first_token_varies_slowest() -> None:
    combos = generate_combinations([[M, D], [M, D], [Y]])
    assert combos == [(M, M, Y), (M, D, Y), (D, M, Y), (D, D, Y)]


def test_count_is_product_of_sizes() -> None:
    assert len(generate_combinations([[Y], [M, D, M], [D, M]])) == 6
