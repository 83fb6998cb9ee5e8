import torch

from ..macro import C_DTYPE
from .gate_wrapper import gate_wrapper


def phaseshift_matrix(params):
    """Compute unitary matrix for phaseshift gate.

    Args:
        params (torch.Tensor): The phase, in radians.

    Returns:
        torch.Tensor: The computed unitary matrix.

    """
    phi = params.type(C_DTYPE)
    exp = torch.exp(1j * phi)

    return torch.stack(
        [
            torch.cat(
                [
                    torch.ones(exp.shape, device=params.device),
                    torch.zeros(exp.shape, device=params.device),
                ],
                dim=-1,
            ),
            torch.cat([torch.zeros(exp.shape, device=params.device), exp], dim=-1),
        ],
        dim=-2,
    ).squeeze(0)


def multiphase_matrix(params, n_wires):
    """Compute unitary matrix for the multi-controlled phase gate.

    The phase is only picked up by the basis state where every wire is 1,
    which makes the gate symmetric in its wires.

    Args:
        params (torch.Tensor): The phase, in radians. Shape [bsz, 1].
        n_wires (int): Number of qubits the gate is applied to.

    Returns:
        torch.Tensor: The computed unitary matrix.

    """
    phi = params.type(C_DTYPE).reshape(-1)
    bsz = phi.shape[0]
    dimension = 2**n_wires

    diagonal = torch.ones(bsz, dimension, dtype=C_DTYPE, device=params.device)
    diagonal[:, -1] = torch.exp(1j * phi)

    return torch.diag_embed(diagonal).squeeze(0)


_phaseshift_mat_dict = {
    "phaseshift": phaseshift_matrix,
    "multiphase": multiphase_matrix,
}


def phaseshift(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Perform the phaseshift gate.

    Args:
        q_device (qintsim.QuantumDevice): The QuantumDevice.
        wires (Union[List[int], int]): Which qubit(s) to apply the gate.
        params (torch.Tensor, optional): Parameters (if any) of the gate.
            Default to None.
        n_wires (int, optional): Number of qubits the gate is applied to.
            Default to None.
        inverse (bool, optional): Whether inverse the gate. Default to False.
        comp_method (bool, optional): Use 'bmm' or 'einsum' method to perform
        matrix vector multiplication. Default to 'bmm'.

    Returns:
        None.

    """
    name = "phaseshift"
    mat = _phaseshift_mat_dict[name]
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


def multiphase(
    q_device,
    wires,
    params=None,
    n_wires=None,
    inverse=False,
    comp_method="bmm",
):
    """Rotate the phase of the all-ones basis state of ``wires``.

    With a single wire this is the same as the phaseshift gate, with two wires
    it is the controlled phase gate, and so on.
    """
    name = "multiphase"
    if n_wires is None:
        wires = [wires] if isinstance(wires, int) else wires
        n_wires = len(wires)

    mat = _phaseshift_mat_dict[name]
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


p = phaseshift
