"""
MIT License

Copyright (c) 2020-present TorchQuantum Authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

from typing import List, Optional

import torch
from torchpack.utils.logging import logger

from qintsim.engine import QCEngine, QInt

__all__ = [
    "SignalResult",
    "prepare_frequency_signal",
    "frequency_manipulation",
    "wave_period_signal",
]


class SignalResult(object):
    """Snapshot of a signal register after a demo.

    Attributes:
        name: name of the qint holding the signal.
        probabilities: probability of each register value.
        amplitudes: complex amplitude of each register value.
    """

    def __init__(self, name: str, probabilities: torch.Tensor, amplitudes: torch.Tensor):
        self.name = name
        self.probabilities = probabilities
        self.amplitudes = amplitudes

    def peaks(self, threshold: float = 1e-3) -> List[int]:
        """Register values whose probability exceeds ``threshold``."""
        return [
            value
            for value, prob in enumerate(self.probabilities.tolist())
            if prob > threshold
        ]

    def __repr__(self):
        return f"SignalResult(name='{self.name}', peaks={self.peaks()})"


def _snapshot(signal: QInt) -> SignalResult:
    return SignalResult(
        name=signal.name,
        probabilities=signal.probabilities().cpu(),
        amplitudes=signal.amplitudes(),
    )


def prepare_frequency_signal(
    qc: QCEngine, n: int, freq: int, name: str = "signal"
) -> QInt:
    """Prepare a complex sinusoid of frequency ``freq`` on ``n`` qubits.

    The register is reset, ``freq`` is written into it and the inverse QFT
    turns the basis state into the sinusoid.
    """
    qc.reset(n)
    qc.write(freq)
    signal = qc.new_qint(n, name)
    signal.invQFT()
    return signal


def frequency_manipulation(
    n: int = 4, freq: int = 2, shift: int = 1, qc: Optional[QCEngine] = None
) -> SignalResult:
    """Shift the frequency of a sinusoidal signal in frequency space.

    The signal is moved to frequency space with the QFT, ``shift`` is added
    to the frequency and the inverse QFT brings it back. The returned signal
    has frequency ``freq + shift`` modulo ``2**n``.
    """
    qc = QCEngine() if qc is None else qc
    signal = prepare_frequency_signal(qc, n, freq)
    logger.debug(f"Signal of frequency {freq} prepared on {n} qubits.")

    signal.QFT()
    signal.add(shift)
    signal.invQFT()

    return _snapshot(signal)


def wave_period_signal(
    num_qubits: int = 4, wave_period: int = 2, qc: Optional[QCEngine] = None
) -> SignalResult:
    """Encode a square wave in the phases of a register and QFT it.

    After the hadamards every value carries the same amplitude; the
    180 degree phase flips the sign of the values whose ``wave_period`` bits
    are set. For a single-bit ``wave_period`` this is a square wave with
    period ``2 * wave_period``, and the QFT moves it to its odd harmonics
    of ``2**num_qubits / (2 * wave_period)``.
    """
    qc = QCEngine() if qc is None else qc
    qc.reset(num_qubits)
    signal = qc.new_qint(num_qubits, "signal")

    signal.write(0)
    signal.hadamard()
    signal.phase(180, wave_period)

    signal.QFT()

    return _snapshot(signal)
