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

import torch
import torch.nn as nn

from qintsim.macro import C_DTYPE
from qintsim.functional import func_name_dict
from qintsim.util.utils import mask_to_qubits, normalize_statevector
from torchpack.utils.logging import logger

from typing import List, Optional, Union

__all__ = ["QuantumDevice"]


class QuantumDevice(nn.Module):
    def __init__(
        self,
        n_wires: int,
        bsz: int = 1,
        device: Union[torch.device, str] = "cpu",
        record_op: bool = False,
    ):
        """A batch of state vectors over ``n_wires`` qubits, starting in |0>.

        Wire 0 is the most significant bit of the flattened basis index, so
        qubit ``i`` of a register (value ``2**i``) is wire ``n_wires - 1 - i``
        and the flattened index of a basis state equals the register value.

        Args:
            n_wires: number of qubits
            bsz: batch size of the quantum state
            device: which classical computing device to use, 'cpu' or 'cuda'
            record_op: whether to record the gates applied to the device
        """
        super().__init__()
        if n_wires < 1:
            logger.exception(f"A quantum device needs at least one qubit.")
            raise ValueError(f"n_wires should be positive, got {n_wires}")

        self.n_wires = n_wires
        self.bsz = bsz
        self.device = device

        _states = torch.zeros(bsz, 2**n_wires, dtype=C_DTYPE)
        _states[:, 0] = 1
        self.register_buffer("states", _states.reshape([bsz] + [2] * n_wires).to(device))

        self.record_op = record_op
        self.op_history = []

    def set_states(self, states: torch.Tensor):
        """Replace the states, given as [bsz, 2**n_wires] or
        [bsz] + [2] * n_wires."""
        bsz = states.shape[0]
        self.states = torch.reshape(states, [bsz] + [2] * self.n_wires).to(
            self.states.device
        )

    def get_states_1d(self):
        """Return the states in a 1d tensor."""
        bsz = self.states.shape[0]
        return torch.reshape(self.states, [bsz, 2**self.n_wires])

    def get_probs_1d(self):
        """Return the probability of each basis state, batch dim first."""
        return self.get_states_1d().abs() ** 2

    def register_values(self, mask: Optional[int] = None):
        """Integer value of the masked qubits for every basis state.

        Returns the values as a tensor of length ``2**n_wires`` together with
        the number of qubits in the mask. Bit ``j`` of a value is the
        ``j``-th set bit of ``mask``.
        """
        if mask is None:
            mask = 2**self.n_wires - 1
        qubits = mask_to_qubits(mask, self.n_wires)
        index = torch.arange(2**self.n_wires, device=self.states.device)
        values = torch.zeros_like(index)
        for j, q in enumerate(qubits):
            values |= ((index >> q) & 1) << j
        return values, len(qubits)

    def marginal_probs(self, mask: Optional[int] = None) -> torch.Tensor:
        """Distribution over the values of the masked qubits, [bsz, 2**k]."""
        probs = self.get_probs_1d().detach()
        values, n_qubits = self.register_values(mask)
        marginal = torch.zeros(
            probs.shape[0], 2**n_qubits, dtype=probs.dtype, device=probs.device
        )
        return marginal.index_add_(1, values, probs)

    def marginal_amplitudes(self, mask: Optional[int] = None, batch_id: int = 0):
        """Amplitudes of batch ``batch_id`` summed by the value of the masked
        qubits."""
        values, n_qubits = self.register_values(mask)
        states = self.get_states_1d()[batch_id].detach()
        amplitudes = torch.zeros(2**n_qubits, dtype=states.dtype, device=states.device)
        return amplitudes.index_add_(0, values, states)

    def project(self, mask: Optional[int], outcomes: List[int]):
        """Collapse each batch onto the basis states whose masked qubits hold
        the given outcome, then renormalize."""
        values, _ = self.register_values(mask)
        outcomes = torch.tensor(outcomes, device=values.device)
        keep = values.unsqueeze(0) == outcomes.unsqueeze(-1)

        states = self.get_states_1d()
        states = torch.where(keep, states, torch.zeros_like(states))
        self.set_states(normalize_statevector(states))

    @property
    def name(self):
        """Return the name of the device."""
        return self.__class__.__name__

    def __repr__(self):
        return (
            f"{self.name}(n_wires={self.n_wires}, bsz={self.bsz}, "
            f"device={self.states.device}, record_op={self.record_op})"
        )


for func_name, func in func_name_dict.items():
    setattr(QuantumDevice, func_name, func)
