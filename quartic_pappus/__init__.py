from .complex_num import Complex, add, conjugate, div, magnitude, make, mul, scale, sub
from .polynomial import coefficients, poly_eval, residuals
from .solver import (
    RootSolution,
    SolveOptions,
    initial_guesses,
    roots_durand_kerner,
    solve_roots,
)
from .geometry import (
    CollinearityResult,
    Line,
    check_collinear,
    collinearity_determinant,
    intersect_lines,
    line_from_points,
)
from .construction import (
    TRIPLE_INDICES,
    ConstructionResult,
    CrossConstruction,
    build_construction,
    cross_construction,
    labelled_triples,
    run_construction,
)
from .sweep import parameter_from_polar, sweep, sweep_uniform
from .printer import format_result, result_to_dict

__all__ = [
    'Complex',
    'make',
    'add',
    'sub',
    'mul',
    'div',
    'scale',
    'magnitude',
    'conjugate',
    'poly_eval',
    'coefficients',
    'residuals',
    'RootSolution',
    'SolveOptions',
    'initial_guesses',
    'roots_durand_kerner',
    'solve_roots',
    'Line',
    'CollinearityResult',
    'line_from_points',
    'intersect_lines',
    'collinearity_determinant',
    'check_collinear',
    'TRIPLE_INDICES',
    'CrossConstruction',
    'ConstructionResult',
    'labelled_triples',
    'cross_construction',
    'build_construction',
    'run_construction',
    'parameter_from_polar',
    'sweep',
    'sweep_uniform',
    'format_result',
    'result_to_dict',
]
