import numpy as np
import torch

import qintsim as qs
from test.utils import check_all_close


def test_measure():
    n_shots = 10000
    qdev = qs.QuantumDevice(n_wires=3, bsz=1)
    qdev.x(wires=2)
    qdev.h(wires=0)

    counts = qs.measure(qdev, n_shots=n_shots)[0]

    assert list(counts.keys()) == qs.gen_bitstrings(3)
    assert sum(counts.values()) == n_shots
    assert np.isclose(counts["001"] / n_shots, 0.5, atol=0.05)
    assert np.isclose(counts["101"] / n_shots, 0.5, atol=0.05)
    assert counts["000"] == 0


def test_probabilities_marginal():
    qdev = qs.QuantumDevice(n_wires=3)
    # qubit 0 is wire 2; qubit 2 is wire 0
    qdev.h(wires=2)
    qdev.x(wires=0)

    check_all_close(
        qs.probabilities(qdev, mask=0b001), np.array([[0.5, 0.5]], dtype=np.float32)
    )
    check_all_close(
        qs.probabilities(qdev, mask=0b100), np.array([[0.0, 1.0]], dtype=np.float32)
    )
    # bits of the value are the set bits of the mask, in order
    check_all_close(
        qs.probabilities(qdev, mask=0b101),
        np.array([[0.0, 0.0, 0.5, 0.5]], dtype=np.float32),
    )


def test_read_collapses():
    generator = torch.Generator().manual_seed(0)
    qdev = qs.QuantumDevice(n_wires=2, bsz=4)
    qdev.h(wires=0)
    qdev.h(wires=1)

    values = qs.read(qdev, mask=0b01, generator=generator)

    assert len(values) == 4
    probs = qs.probabilities(qdev, mask=0b01)
    for k, value in enumerate(values):
        assert value in (0, 1)
        assert np.isclose(probs[k, value].item(), 1.0, atol=1e-5)
    # the unread qubit stays in superposition
    check_all_close(
        qs.probabilities(qdev, mask=0b10), np.full((4, 2), 0.5, dtype=np.float32)
    )


def test_read_basis_state_is_deterministic():
    qdev = qs.QuantumDevice(n_wires=3)
    qdev.x(wires=0)
    qdev.x(wires=2)
    assert qs.read(qdev) == [0b101]


def test_register_amplitudes():
    qdev = qs.QuantumDevice(n_wires=2)
    qdev.x(wires=0)
    qdev.h(wires=1)
    amplitudes = qs.register_amplitudes(qdev, mask=0b01)
    check_all_close(amplitudes, np.array([1, 1], dtype=np.complex64) / np.sqrt(2))


def test_draw_amplitudes():
    import matplotlib

    matplotlib.use("Agg")
    qdev = qs.QuantumDevice(n_wires=2)
    qdev.h(wires=0)
    ax = qs.draw_amplitudes(qdev)
    assert len(ax.patches) == 4
