import numpy as np
import pytest
import torch

import qintsim as qs
from test.utils import check_all_close, random_state, device_with_state


@pytest.mark.parametrize("n_wires", [1, 2, 3, 5])
def test_qft_matrix_is_unitary(n_wires):
    mat = qs.qft_matrix(n_wires)
    identity = torch.eye(2**n_wires, dtype=torch.complex64)
    check_all_close(mat @ mat.conj().T, identity)


def test_qft_matrix_matches_inverse_dft():
    # omega = exp(+2 pi i / N), which numpy calls the inverse transform
    n_wires = 4
    dimension = 2**n_wires
    expected = np.fft.ifft(np.eye(dimension), axis=0) * np.sqrt(dimension)
    check_all_close(qs.qft_matrix(n_wires), expected.astype(np.complex64))


@pytest.mark.parametrize("comp_method", ["bmm", "einsum"])
def test_qft_then_iqft_is_identity(comp_method):
    state = random_state(4, bsz=2, seed=3)
    qdev = device_with_state(state)

    qdev.qft(wires=[0, 1, 2, 3], comp_method=comp_method)
    qdev.iqft(wires=[0, 1, 2, 3], comp_method=comp_method)

    check_all_close(qdev.get_states_1d(), state.astype(np.complex64))


def test_qft_on_subset_of_wires():
    # wires 1, 2 hold a 2 qubit integer, wire 0 stays |1>
    qdev = qs.QuantumDevice(n_wires=3)
    qdev.x(wires=0)
    qdev.qft(wires=[1, 2])

    expected = np.zeros(8, dtype=np.complex64)
    expected[4:] = 0.5
    check_all_close(qdev.get_states_1d()[0], expected)


def test_bmm_and_einsum_agree():
    state = random_state(3, seed=7)
    qdev_bmm = device_with_state(state)
    qdev_einsum = device_with_state(state)

    qdev_bmm.qft(wires=[2, 0])
    qdev_einsum.qft(wires=[2, 0], comp_method="einsum")

    check_all_close(qdev_bmm.get_states_1d(), qdev_einsum.get_states_1d())


def test_unknown_comp_method():
    qdev = qs.QuantumDevice(n_wires=2)
    with pytest.raises(ValueError):
        qdev.qft(wires=[0, 1], comp_method="matmul")


if __name__ == "__main__":
    test_qft_then_iqft_is_identity("bmm")
