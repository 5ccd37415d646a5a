from acseries import SeriesCircuit, CircuitSource, RLCImpedance


def main():
    circuit = SeriesCircuit(CircuitSource(voltage_rms=230.0, f_hz=50.0))
    circuit.add_element(RLCImpedance(R=10.0, L=0.0318, C=0.0))

    print(circuit)
    print()
    print(circuit.analyze())


if __name__ == "__main__":
    main()
