import numpy as np
import pytest
import torch

from qintsim.util import (
    mask_to_qubits,
    normalize_statevector,
    qubits_to_wires,
)
from test.utils import check_all_close


def test_mask_to_qubits():
    assert mask_to_qubits(0b1010, 4) == [1, 3]
    assert mask_to_qubits(0, 4) == []
    with pytest.raises(ValueError):
        mask_to_qubits(16, 4)
    with pytest.raises(ValueError):
        mask_to_qubits(-1, 4)


def test_qubits_to_wires():
    assert qubits_to_wires([0, 1, 2], 3) == [0, 1, 2]
    assert qubits_to_wires([0, 1], 4) == [2, 3]
    assert qubits_to_wires([3], 4) == [0]


def test_normalize_statevector():
    states = torch.tensor([[3, 4], [0, 0]], dtype=torch.complex64)
    normalized = normalize_statevector(states)
    check_all_close(
        normalized, np.array([[0.6, 0.8], [1, 0]], dtype=np.complex64)
    )
