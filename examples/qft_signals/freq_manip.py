"""Shift the frequency of a sinusoidal signal by editing it in frequency space.

Usage:
    python examples/qft_signals/freq_manip.py [configs/freq_manip.yml] [--demo.freq 3]
"""
import os

from torchpack.utils.logging import logger

from common import build_engine, load_configs, show


def main() -> None:
    configs = load_configs(
        "QFT frequency manipulation",
        os.path.join(os.path.dirname(__file__), "configs", "freq_manip.yml"),
    )
    qc = build_engine(configs)
    n, freq, shift = configs.demo.n, configs.demo.freq, configs.demo.shift

    # prepare a complex sinusoidal signal
    qc.reset(n)
    qc.write(freq)
    signal = qc.new_qint(n, "signal")
    signal.invQFT()
    show(qc, signal, f"signal with frequency {freq}")

    # move to frequency space with QFT
    signal.QFT()
    show(qc, signal, "frequency space")

    # increase the frequency of the signal
    signal.add(shift)

    # move back from frequency space
    signal.invQFT()
    show(qc, signal, f"signal with frequency {(freq + shift) % 2**n}")

    if configs.run.record_op:
        logger.info(f"Applied operations: {qc.op_history}")


if __name__ == "__main__":
    main()
