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

from typing import List

import torch
from torchpack.utils.logging import logger

__all__ = [
    "normalize_statevector",
    "mask_to_qubits",
    "qubits_to_wires",
]


def normalize_statevector(states):
    """
       Normalize a statevector to ensure the square magnitude of the statevector sums to 1.

       Args:
           states (torch.Tensor): The statevector tensor, batch dim first.

       Returns:
           torch.Tensor: The normalized statevector tensor.
       """
    original_shape = states.shape
    states_reshape = states.reshape(states.shape[0], -1).clone()

    # for states with no energy, need to set all zero state as energy 1
    energy = (abs(states_reshape) ** 2).sum(dim=-1)
    if energy.min() == 0:
        for k, val in enumerate(energy):
            if val == 0:
                states_reshape[k][0] = 1

    factors = torch.sqrt(1 / ((abs(states_reshape) ** 2).sum(dim=-1))).unsqueeze(-1)
    states = (states_reshape * factors).reshape(original_shape)

    return states


def mask_to_qubits(mask: int, n_qubits: int) -> List[int]:
    """Return the qubit indices whose bit is set in ``mask``, lowest first.

    Qubit ``i`` carries the value ``2**i`` of the register.
    """
    if mask < 0 or mask >= 2**n_qubits:
        logger.exception(f"Mask {mask} does not fit into {n_qubits} qubits.")
        raise ValueError(f"mask {mask} out of range for {n_qubits} qubits")
    return [k for k in range(n_qubits) if (mask >> k) & 1]


def qubits_to_wires(qubits: List[int], n_wires: int) -> List[int]:
    """Map qubit indices to device wires, most significant qubit first.

    The device keeps wire 0 as the most significant bit of the flattened
    state, so qubit ``i`` lives on wire ``n_wires - 1 - i``. The returned
    wire order makes the matrix index of a gate equal to the integer value
    of the qubits it acts on.
    """
    return [n_wires - 1 - q for q in sorted(qubits, reverse=True)]
