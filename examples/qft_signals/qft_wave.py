"""Encode a square wave in the phases of a register and find its frequency
with the QFT.

Usage:
    python examples/qft_signals/qft_wave.py [configs/qft_wave.yml] [--demo.wave_period 4]
"""
import os

from torchpack.utils.logging import logger

from common import build_engine, load_configs, show


def main() -> None:
    configs = load_configs(
        "QFT of a phase encoded wave",
        os.path.join(os.path.dirname(__file__), "configs", "qft_wave.yml"),
    )
    qc = build_engine(configs)
    num_qubits = configs.demo.num_qubits
    wave_period = configs.demo.wave_period

    qc.reset(num_qubits)
    signal = qc.new_qint(num_qubits, "signal")

    # prepare the signal
    signal.write(0)
    signal.hadamard()
    signal.phase(180, wave_period)
    show(qc, signal, f"wave with period mask {wave_period}")

    signal.QFT()
    show(qc, signal, "after QFT")

    peaks = [v for v in range(2**num_qubits) if signal.peek_probability(v) > 1e-3]
    logger.info(f"Frequencies present: {peaks}")


if __name__ == "__main__":
    main()
