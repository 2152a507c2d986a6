"""Example pipeline: solve the quartic for m = 1 and run the cross construction."""

from quartic_pappus import Complex, format_result, residuals, run_construction


def main() -> None:
    m = Complex(1.0, 0.0)
    result = run_construction(m)
    print(format_result(result))
    print("Max residual:", max(residuals(result.roots, m)))


if __name__ == "__main__":
    main()
