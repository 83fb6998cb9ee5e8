import torch

from typing import List
from ..macro import C_DTYPE
from torchpack.utils.logging import logger
from .gate_wrapper import gate_wrapper


def _as_ints(params) -> List[int]:
    return [int(v) for v in torch.round(params.reshape(-1)).tolist()]


def addconst_matrix(params, n_wires):
    """Compute the permutation matrix of ``|x> -> |x + k mod 2**n>``.

    Args:
        params (torch.Tensor): The constant ``k``, may be negative.
            Shape [bsz, 1].
        n_wires (int): Number of qubits of the register.

    Returns:
        torch.Tensor: The computed unitary matrix.

    """
    dimension = 2**n_wires
    source = torch.arange(dimension)
    mats = []
    for k in _as_ints(params):
        mat = torch.zeros(dimension, dimension, dtype=C_DTYPE)
        mat[(source + k) % dimension, source] = 1
        mats.append(mat)

    return torch.stack(mats).squeeze(0)


def addreg_matrix(params, n_wires):
    """Compute the permutation matrix of ``|t, s> -> |t + s mod 2**nt, s>``.

    The first ``n_wires - ns`` wires hold the target register and the last
    ``ns`` wires the source register, both most significant bit first.

    Args:
        params (torch.Tensor): Number of source qubits ``ns``.
        n_wires (int): Total number of qubits of both registers.

    Returns:
        torch.Tensor: The computed unitary matrix.

    """
    n_source = _as_ints(params)[0]
    n_target = n_wires - n_source
    try:
        assert n_source > 0 and n_target > 0
    except AssertionError as err:
        logger.exception(
            f"addreg needs a non-empty source and target, got {n_source} "
            f"source qubits out of {n_wires}."
        )
        raise err

    dimension = 2**n_wires
    combined = torch.arange(dimension)
    target = combined // 2**n_source
    source = combined % 2**n_source
    result = ((target + source) % 2**n_target) * 2**n_source + source

    mat = torch.zeros(dimension, dimension, dtype=C_DTYPE)
    mat[result, combined] = 1
    return mat


_arithmetic_mat_dict = {
    "addconst": addconst_matrix,
    "addreg": addreg_matrix,
}


def addconst(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Add the constant in ``params`` to the integer held by ``wires``.

    Args:
        q_device (qintsim.QuantumDevice): The QuantumDevice.
        wires (Union[List[int], int]): The register, most significant
            qubit first.
        params (int or torch.Tensor): The constant to add.
        n_wires (int, optional): Number of qubits the gate is applied to.
            Default to None.
        inverse (bool, optional): Subtract instead of add. Default to False.
        comp_method (bool, optional): Use 'bmm' or 'einsum' method to perform
        matrix vector multiplication. Default to 'bmm'.

    Returns:
        None.

    """
    name = "addconst"
    mat = _arithmetic_mat_dict[name]
    gate_wrapper(
        name=name,
        mat=mat,
        method=comp_method,
        q_device=q_device,
        wires=wires,
        params=params,
        n_wires=n_wires,
        inverse=inverse,
    )


def addreg(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Add a source register into a target register.

    ``wires`` lists the target wires followed by the source wires and
    ``params`` holds the number of source wires.
    """
    name = "addreg"
    mat = _arithmetic_mat_dict[name]
    gate_wrapper(
        name=name,
        mat=mat,
        method=comp_method,
        q_device=q_device,
        wires=wires,
        params=params,
        n_wires=n_wires,
        inverse=inverse,
    )
