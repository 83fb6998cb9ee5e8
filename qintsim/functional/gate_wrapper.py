import functools
import torch
import numpy as np

from typing import Callable, Union, List, TYPE_CHECKING
from ..macro import C_DTYPE, F_DTYPE, ABC, ABC_ARRAY, MAX_WIRES
from torchpack.utils.logging import logger


if TYPE_CHECKING:
    from qintsim.device import QuantumDevice
else:
    QuantumDevice = None

# gates whose matrix only depends on the number of wires
_N_WIRES_GATES = ["qft"]
# gates whose matrix depends on both params and number of wires
_PARAM_N_WIRES_GATES = ["multiphase", "addconst", "addreg"]


def apply_unitary_einsum(state, mat, wires):
    """Apply the unitary to the statevector using torch.einsum method.

    Args:
        state (torch.Tensor): The statevector.
        mat (torch.Tensor): The unitary matrix of the operation.
        wires (int or List[int]): Which qubit the operation is applied to.

    Returns:
        torch.Tensor: The new statevector.

    """
    device_wires = wires

    # minus one because of batch
    total_wires = len(state.shape) - 1

    if total_wires + len(device_wires) >= MAX_WIRES * 2:
        logger.exception(f"Cannot support {total_wires} qubits with einsum.")
        raise ValueError(
            f"einsum method supports at most {MAX_WIRES * 2 - 1} indices, "
            f"use comp_method='bmm' instead"
        )

    if len(mat.shape) > 2:
        is_batch_unitary = True
        bsz = mat.shape[0]
        shape_extension = [bsz]
    else:
        is_batch_unitary = False
        shape_extension = []

    mat = mat.reshape(shape_extension + [2] * len(device_wires) * 2)

    mat = mat.type(C_DTYPE).to(state.device)

    # Tensor indices of the quantum state
    state_indices = ABC[:total_wires]

    # Indices of the quantum state affected by this operation
    affected_indices = "".join(ABC_ARRAY[list(device_wires)].tolist())

    # All affected indices will be summed over, so we need the same number
    # of new indices
    new_indices = ABC[total_wires: total_wires + len(device_wires)]

    # The new indices of the state are given by the old ones with the
    # affected indices replaced by the new_indices
    new_state_indices = functools.reduce(
        lambda old_string, idx_pair: old_string.replace(idx_pair[0], idx_pair[1]),
        zip(affected_indices, new_indices),
        state_indices,
    )

    state_indices = ABC[-1] + state_indices
    new_state_indices = ABC[-1] + new_state_indices
    if is_batch_unitary:
        new_indices = ABC[-1] + new_indices

    einsum_indices = (
        f"{new_indices}{affected_indices}," f"{state_indices}->{new_state_indices}"
    )

    new_state = torch.einsum(einsum_indices, mat, state)

    return new_state


def apply_unitary_bmm(state, mat, wires):
    """Apply the unitary to the statevector using torch.bmm method.

    Args:
        state (torch.Tensor): The statevector.
        mat (torch.Tensor): The unitary matrix of the operation.
        wires (int or List[int]): Which qubit the operation is applied to.

    Returns:
        torch.Tensor: The new statevector.

    """
    device_wires = wires

    mat = mat.type(C_DTYPE).to(state.device)

    devices_dims = [w + 1 for w in device_wires]
    permute_to = list(range(state.dim()))
    for d in sorted(devices_dims, reverse=True):
        del permute_to[d]
    permute_to = permute_to[:1] + devices_dims + permute_to[1:]
    permute_back = list(np.argsort(permute_to))
    original_shape = state.shape
    permuted = state.permute(permute_to).reshape([original_shape[0], mat.shape[-1], -1])

    if len(mat.shape) > 2:
        # both matrix and state are in batch mode
        new_state = mat.bmm(permuted)
    else:
        # matrix no batch, state in batch mode
        bsz = permuted.shape[0]
        expand_shape = [bsz] + list(mat.shape)
        new_state = mat.expand(expand_shape).bmm(permuted)

    permuted_shape = [original_shape[0]] + [original_shape[d] for d in permute_to[1:]]
    new_state = new_state.reshape(permuted_shape).permute(permute_back)

    return new_state


def gate_wrapper(
        name,
        mat,
        method,
        q_device: QuantumDevice,
        wires,
        params=None,
        n_wires=None,
        inverse=False,
):
    """Apply a gate matrix to the states of a QuantumDevice.

    Args:
        name (str): The name of the operation.
        mat (torch.Tensor or Callable): The unitary matrix of the gate, or a
            function building it from params and/or the number of wires.
        method (str): 'bmm' or 'einsum' to compute matrix vector
            multiplication.
        q_device (qintsim.QuantumDevice): The QuantumDevice.
        wires (Union[List[int], int]): Which qubit(s) to apply the gate.
        params (torch.Tensor, optional): Parameters (if any) of the gate.
            Default to None.
        n_wires (int, optional): Number of qubits the gate is applied to.
            Default to None.
        inverse (bool, optional): Whether inverse the gate. Default to False.

    Returns:
        None.

    """
    if params is not None:
        if not isinstance(params, torch.Tensor):
            # this is for directly inputting parameters as a number
            params = torch.tensor(params, dtype=F_DTYPE)

        if params.dim() == 1:
            params = params.unsqueeze(-1)
        elif params.dim() == 0:
            params = params.unsqueeze(-1).unsqueeze(-1)
    wires = [wires] if isinstance(wires, int) else list(wires)

    if n_wires is None:
        n_wires = len(wires)

    if q_device.record_op:
        q_device.op_history.append(
            {
                "name": name,  # type: ignore
                "wires": np.array(wires).squeeze().tolist(),
                "params": params.squeeze().detach().cpu().numpy().tolist()
                if params is not None
                else None,
                "inverse": inverse,
            }
        )

    if isinstance(mat, Callable):
        if name in _N_WIRES_GATES:
            matrix = mat(n_wires)
        elif name in _PARAM_N_WIRES_GATES:
            matrix = mat(params, n_wires)
        else:
            matrix = mat(params)
    else:
        matrix = mat

    if inverse:
        matrix = matrix.conj()
        if matrix.dim() == 3:
            matrix = matrix.permute(0, 2, 1)
        else:
            matrix = matrix.permute(1, 0)
    assert np.log2(matrix.shape[-1]) == len(wires)

    state = q_device.states
    if method == "einsum":
        q_device.states = apply_unitary_einsum(state, matrix, wires)
    elif method == "bmm":
        q_device.states = apply_unitary_bmm(state, matrix, wires)
    else:
        raise ValueError(f"Unknown comp_method {method}, use 'bmm' or 'einsum'")
