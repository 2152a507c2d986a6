from typing import Dict, List, Optional

from .complex_num import Complex
from .construction import POINT_LABELS, ConstructionResult


def complex_str(z: Complex, digits: int = 5) -> str:
    sign = "+" if z.im >= 0 else "-"
    return f"{z.re:.{digits}f} {sign} {abs(z.im):.{digits}f}i"


def _point_str(point: Optional[Complex]) -> str:
    return "none" if point is None else complex_str(point)


def format_result(result: ConstructionResult) -> str:
    m = result.m
    solution = result.solution
    lines: List[str] = [
        f"m = {complex_str(m, digits=4)}",
        f"solver: {solution.iterations} pass(es), max correction {solution.max_correction:.3e}, "
        f"converged={'yes' if solution.converged else 'no'}",
        "roots:",
    ]
    for idx, root in enumerate(result.roots):
        lines.append(f" r{idx}: {complex_str(root)}")
    for label, point in zip(POINT_LABELS, result.points):
        lines.append(f"{label} = {_point_str(point)}")

    if result.collinear is None:
        lines.append("Collinear: n/a (fewer than 3 intersection points)")
    else:
        lines.append("Collinear: YES" if result.collinear else "Collinear: NO")
        lines.append(f"det(P,Q,R) = {result.determinant:.6e}")
    return "\n".join(lines)


def _complex_payload(point: Optional[Complex]) -> Optional[List[float]]:
    if point is None:
        return None
    return [point.re, point.im]


def result_to_dict(result: ConstructionResult) -> Dict[str, object]:
    """Return a JSON-serialisable view of ``result``."""

    solution = result.solution
    return {
        "m": _complex_payload(result.m),
        "roots": [_complex_payload(root) for root in result.roots],
        "solver": {
            "iterations": solution.iterations,
            "max_correction": solution.max_correction,
            "converged": solution.converged,
            "max_iter": solution.options.max_iter,
            "tol": solution.options.tol,
            "update": solution.options.update,
            "denominator": solution.options.denominator,
        },
        "points": {label: _complex_payload(point) for label, point in zip(POINT_LABELS, result.points)},
        "determinant": result.determinant,
        "collinear": result.collinear,
    }


__all__ = ["complex_str", "format_result", "result_to_dict"]
