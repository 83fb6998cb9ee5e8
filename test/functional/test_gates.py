import numpy as np
import torch

import qintsim as qs
from test.utils import check_all_close, random_state, device_with_state


def test_hadamard_makes_equal_superposition():
    qdev = qs.QuantumDevice(n_wires=3)
    for wire in range(3):
        qdev.h(wires=wire)

    expected = np.ones(8, dtype=np.complex64) / np.sqrt(8)
    check_all_close(qdev.get_states_1d()[0], expected)


def test_paulix_flips_basis_state():
    qdev = qs.QuantumDevice(n_wires=3)
    qdev.x(wires=1)

    # wire 0 is the most significant bit
    assert qdev.get_probs_1d()[0].argmax().item() == 2


def test_multiphase_on_one_wire_is_phaseshift():
    state = random_state(2, seed=1)
    qdev_p = device_with_state(state)
    qdev_m = device_with_state(state)

    qdev_p.phaseshift(wires=1, params=0.7)
    qdev_m.multiphase(wires=[1], params=0.7)

    check_all_close(qdev_p.get_states_1d(), qdev_m.get_states_1d())


def test_multiphase_only_touches_all_ones():
    mat = qs.multiphase_matrix(torch.tensor([[np.pi]]), 2)
    expected = np.diag([1, 1, 1, -1]).astype(np.complex64)
    check_all_close(mat, expected)


def test_multiphase_inverse():
    state = random_state(3, seed=2)
    qdev = device_with_state(state)

    qdev.multiphase(wires=[0, 2], params=1.1)
    qdev.multiphase(wires=[0, 2], params=1.1, inverse=True)

    check_all_close(qdev.get_states_1d(), state.astype(np.complex64))


def test_record_op():
    qdev = qs.QuantumDevice(n_wires=2, record_op=True)
    qdev.h(wires=0)
    qdev.qft(wires=[0, 1], inverse=True)

    assert [op["name"] for op in qdev.op_history] == ["hadamard", "qft"]
    assert qdev.op_history[1]["inverse"]
    assert qdev.op_history[1]["wires"] == [0, 1]
