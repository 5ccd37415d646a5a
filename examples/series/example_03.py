"""
Power factor correction of an inductive load: a capacitor is connected in
series with a motor-like R-L load, and the power factor is computed for a
range of capacitances.
"""
import logging

from acseries import CircuitSource, RLCImpedance, analyze_circuit


def main():
    logging.basicConfig(level=logging.INFO)
    source = CircuitSource(voltage_rms=230.0, f_hz=50.0)
    load = RLCImpedance(R=8.0, L=0.05, C=0.0, uid="load")

    for C in [0.0, 470e-6, 330e-6, 220e-6]:
        cap = RLCImpedance(R=0.0, L=0.0, C=C, uid="cap")
        elements = [load] if C == 0.0 else [load, cap]
        res = analyze_circuit(elements, source)
        print(
            f"C = {C * 1e6:6.1f} µF:  I = {res.current_rms:7.3f} A, "
            f"cos(phi) = {res.power_factor:.3f} ({res.lead_lag}), "
            f"Q = {res.reactive_power:9.1f} VAR"
        )


if __name__ == '__main__':
    main()
