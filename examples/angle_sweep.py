"""Example: sweep arg(m) around a circle and report solver convergence."""

from quartic_pappus import SolveOptions, sweep_uniform


def main() -> None:
    results = sweep_uniform(1.25, 12, SolveOptions(max_iter=200, tol=1e-12))
    for result in results:
        r = result.points[2]
        rendered = "none" if r is None else f"({r.re:+.4f}, {r.im:+.4f})"
        print(
            f"m=({result.m.re:+.3f}, {result.m.im:+.3f}) "
            f"passes={result.solution.iterations:3d} R={rendered}"
        )


if __name__ == "__main__":
    main()
