import pytest

from puzzlebox.spiral import element, main, render


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7, 10])
def test_elements_form_a_permutation(n):
    values = sorted(element(n, x, y) for x in range(n) for y in range(n))
    assert values == list(range(n * n))


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_consecutive_numbers_are_neighbours(n):
    positions = {element(n, x, y): (x, y) for x in range(n) for y in range(n)}
    for value in range(n * n - 1):
        (x1, y1), (x2, y2) = positions[value], positions[value + 1]
        assert abs(x1 - x2) + abs(y1 - y2) == 1


@pytest.mark.parametrize("n", [2, 4, 6])
def test_even_spiral_starts_top_left(n):
    assert element(n, 0, 0) == n * n - 1


def test_single_cell():
    assert element(1, 0, 0) == 0


def test_out_of_range_raises():
    with pytest.raises(ValueError):
        element(3, 3, 0)


def test_render_layout():
    n = 10
    width = len(str(n * n - 1))
    lines = render(n).splitlines()
    assert len(lines) == n
    for y, line in enumerate(lines):
        assert len(line) == n * (width + 1)
        assert [int(field) for field in line.split()] == [element(n, x, y) for x in range(n)]


def test_main_prints_requested_size(capsys):
    assert main(["3"]) == 0
    assert capsys.readouterr().out == render(3)


def test_main_defaults_to_ten(capsys):
    main([])
    assert capsys.readouterr().out == render(10)