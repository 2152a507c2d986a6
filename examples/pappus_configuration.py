"""Example: the cross construction on two triples taken from two lines."""

from quartic_pappus import Complex, cross_construction

FIRST = (Complex(0.0, 0.0), Complex(1.0, 0.0), Complex(3.0, 0.0))
SECOND = (Complex(0.0, 1.0), Complex(2.0, 2.0), Complex(4.0, 3.0))


def main() -> None:
    construction = cross_construction(FIRST, SECOND)
    for label, point in zip("PQR", construction.points):
        print(f"{label}: ({point.re:.6f}, {point.im:.6f})")
    print("Determinant:", construction.determinant)
    print("Collinear:", construction.collinear)


if __name__ == "__main__":
    main()
