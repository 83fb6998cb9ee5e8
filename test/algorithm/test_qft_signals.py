import numpy as np
import pytest

from qintsim import QCEngine
from qintsim.algorithm import (
    frequency_manipulation,
    prepare_frequency_signal,
    wave_period_signal,
)
from test.utils import check_all_close


@pytest.mark.parametrize("freq", [0, 1, 2, 5])
def test_prepare_frequency_signal(freq):
    n = 4
    dimension = 2**n
    qc = QCEngine()
    signal = prepare_frequency_signal(qc, n, freq)

    k = np.arange(dimension)
    expected = np.exp(-2j * np.pi * freq * k / dimension) / np.sqrt(dimension)
    check_all_close(signal.amplitudes(), expected.astype(np.complex64))

    signal.QFT()
    assert signal.peek_probability(freq) == pytest.approx(1.0, abs=1e-5)


def test_frequency_manipulation():
    qc = QCEngine()
    result = frequency_manipulation(n=4, freq=2, shift=1, qc=qc)

    # the signal is spread evenly over all values ...
    check_all_close(result.probabilities, np.full(16, 1 / 16, dtype=np.float32))

    # ... and its frequency moved from 2 to 3
    signal = qc.qints["signal"]
    signal.QFT()
    assert signal.read() == 3


def test_frequency_manipulation_wraps():
    qc = QCEngine()
    frequency_manipulation(n=3, freq=7, shift=2, qc=qc)
    signal = qc.qints["signal"]
    signal.QFT()
    assert signal.read() == 1


@pytest.mark.parametrize(
    "wave_period,peaks",
    [
        (1, [8]),
        (2, [4, 12]),
        (4, [2, 6, 10, 14]),
        (8, [1, 3, 5, 7, 9, 11, 13, 15]),
    ],
)
def test_wave_period_signal(wave_period, peaks):
    result = wave_period_signal(num_qubits=4, wave_period=wave_period)
    assert result.peaks() == peaks
    assert result.probabilities.sum().item() == pytest.approx(1.0, abs=1e-5)


def test_wave_period_signal_symmetric_peaks():
    result = wave_period_signal(num_qubits=4, wave_period=2)
    check_all_close(result.probabilities[[4, 12]], np.array([0.5, 0.5], dtype=np.float32))
    assert "signal" in repr(result)
