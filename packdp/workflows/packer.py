import packdp.logs
from packdp.exceptions import PackerError
from packdp.problem import parse_lines
from packdp.dp import DynamicProgrammingSolver

logger = packdp.logs.logger


def _configured_solver(options):
    # Bad options are a caller error, so they are raised before any input is read
    solver = DynamicProgrammingSolver()
    solver.set_options(**options)
    return solver


def pack_lines_and_return_pool(lines, **options):
    solver = _configured_solver(options)
    try:
        return solver.solve_all_and_return_pool(parse_lines(lines))
    except Exception as e:
        raise PackerError(f"Cannot pack instances: {e!r}") from e


def pack_lines(lines, **options):
    """
    Solve one instance per line of text and return the selections, one per
    line.
    """
    return pack_lines_and_return_pool(lines, **options).solutions.render()


def pack_and_return_pool(filename, **options):
    solver = _configured_solver(options)
    logger.verbose(f"Reading instances from '{filename}'")
    try:
        with open(filename, "r", encoding="utf-8") as INPUT:
            results = solver.solve_all_and_return_pool(parse_lines(INPUT))
    except Exception as e:
        raise PackerError(f"Cannot pack instances from '{filename}': {e!r}") from e
    results.solutions.metadata.filename = str(filename)
    return results


def pack(filename, **options):
    """
    Pack the instances in a text file.

    Returns the selection of each line joined with newlines, where each
    selection is either a comma-separated list of item indices or '-'.
    Raises PackerError if the file cannot be read or any instance in it
    cannot be solved, and ValueError for unknown options.
    """
    return pack_and_return_pool(filename, **options).solutions.render()
