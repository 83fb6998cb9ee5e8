import numpy as np
import pytest
import torch

import qintsim as qs
from test.utils import check_all_close


def test_init_zero_state():
    qdev = qs.QuantumDevice(n_wires=3, bsz=2)
    expected = np.zeros((2, 8), dtype=np.complex64)
    expected[:, 0] = 1
    check_all_close(qdev.get_states_1d(), expected)
    assert qdev.states.shape == (2, 2, 2, 2)


def test_set_states():
    qdev = qs.QuantumDevice(n_wires=1)
    qdev.set_states(torch.tensor([[0, 1]], dtype=torch.complex64))
    check_all_close(qdev.get_states_1d(), np.array([[0, 1]], dtype=np.complex64))
    check_all_close(qdev.get_probs_1d(), np.array([[0, 1]], dtype=np.float32))


def test_register_values():
    qdev = qs.QuantumDevice(n_wires=3)
    values, n_qubits = qdev.register_values(0b101)
    assert n_qubits == 2
    assert values.tolist() == [0, 1, 0, 1, 2, 3, 2, 3]

    values, n_qubits = qdev.register_values()
    assert n_qubits == 3
    assert values.tolist() == list(range(8))


def test_marginal_probs_and_amplitudes():
    qdev = qs.QuantumDevice(n_wires=2, bsz=2)
    # value 1 and value 3 with equal weight, qubit 0 is always set
    amp = np.sqrt(0.5)
    qdev.set_states(
        torch.tensor([[0, amp, 0, amp], [0, 1, 0, 0]], dtype=torch.complex64)
    )

    check_all_close(
        qdev.marginal_probs(0b01), np.array([[0, 1], [0, 1]], dtype=np.float32)
    )
    check_all_close(
        qdev.marginal_probs(0b10), np.array([[0.5, 0.5], [1, 0]], dtype=np.float32)
    )
    check_all_close(
        qdev.marginal_amplitudes(0b10, batch_id=0),
        np.array([amp, amp], dtype=np.complex64),
    )


def test_project():
    qdev = qs.QuantumDevice(n_wires=2, bsz=2)
    qdev.set_states(torch.full((2, 4), 0.5, dtype=torch.complex64))
    qdev.project(0b10, [1, 0])

    amp = np.sqrt(0.5)
    check_all_close(
        qdev.get_states_1d(),
        np.array([[0, 0, amp, amp], [amp, amp, 0, 0]], dtype=np.complex64),
    )


def test_invalid_number_of_wires():
    with pytest.raises(ValueError):
        qs.QuantumDevice(n_wires=0)


def test_repr():
    qdev = qs.QuantumDevice(n_wires=2, record_op=True)
    assert repr(qdev) == "QuantumDevice(n_wires=2, bsz=1, device=cpu, record_op=True)"
    assert qdev.name == "QuantumDevice"
