from puzzlebox.collage.images import Imgres
from puzzlebox.collage.solver import Solver


def _ignore(current, maximum):
    return None


def test_solver_sorts_by_width_stably():
    data = [Imgres("a", 30, 1), Imgres("b", 10, 2), Imgres("c", 30, 3), Imgres("d", 20, 4)]
    solver = Solver(data, _ignore)
    assert [image.filename for image in solver.res_data] == ["b", "d", "a", "c"]


def test_solve_without_enough_images_finds_nothing():
    data = [Imgres("a", 10, 10), Imgres("b", 10, 20), Imgres("c", 20, 10)]
    ground_size, images = Solver(data, _ignore).solve(1)
    assert (ground_size, images) == (0, [])


def test_solve_ground_row_of_two():
    data = [Imgres("a", 10, 10), Imgres("b", 10, 10)]
    solver = Solver(data, _ignore)
    assert solver.solve(2) == (0, [])
    assert solver.progress.current == 2