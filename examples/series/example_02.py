from acseries import RectangularImpedance, InputMode, switch_mode


def main():
    f_hz = 60.0
    Z = RectangularImpedance(5.0, -20.0)

    # The same impedance in each input mode
    views = Z.views(f_hz)
    print("rectangular:", views.rectangular)
    print("polar:      ", views.polar)
    print("R-L-C:      ", views.rlc)

    # Switching the input mode keeps the impedance value
    Z_rlc = switch_mode(Z, InputMode.RLC, f_hz)
    print("Z(jw) =", Z_rlc.Z_f(f_hz))


if __name__ == "__main__":
    main()
