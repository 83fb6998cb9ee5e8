import random

import numpy as np
import torch
import matplotlib
import matplotlib.pyplot as plt

from collections import Counter, OrderedDict
from typing import List, Optional

__all__ = [
    "gen_bitstrings",
    "measure",
    "probabilities",
    "read",
    "register_amplitudes",
    "draw_amplitudes",
]


def gen_bitstrings(n_wires):
    return ["{:0{}b}".format(k, n_wires) for k in range(2**n_wires)]


def measure(qdev, n_shots=1024, draw_id=None):
    """Measure the target state and obtain classical bitstream distribution
    Args:
        qdev: input qintsim.QuantumDevice
        n_shots: number of simulated shots
        draw_id: index of the batch whose distribution is plotted
    Returns:
        distribution of bitstrings
    """
    bitstring_candidates = gen_bitstrings(qdev.n_wires)

    state_mag = qdev.get_states_1d().abs().detach().cpu().numpy()
    distri_all = []

    for state_mag_one in state_mag:
        state_prob_one = np.abs(state_mag_one) ** 2
        measured = random.choices(
            population=bitstring_candidates,
            weights=state_prob_one,
            k=n_shots,
        )
        counter = Counter(measured)
        counter.update({key: 0 for key in bitstring_candidates})
        distri = dict(counter)
        distri = OrderedDict(sorted(distri.items()))
        distri_all.append(distri)

    if draw_id is not None:
        plt.bar(distri_all[draw_id].keys(), distri_all[draw_id].values())
        plt.xticks(rotation="vertical")
        plt.xlabel("bitstring [qubit0, qubit1, ..., qubitN]")
        plt.title("distribution of measured bitstrings")
        plt.show()
    return distri_all


def probabilities(qdev, mask: Optional[int] = None) -> torch.Tensor:
    """Marginal distribution over the masked qubits, shape [bsz, 2**k]."""
    return qdev.marginal_probs(mask)


def read(qdev, mask: Optional[int] = None, generator=None) -> List[int]:
    """Projectively measure the masked qubits of every batch.

    The states collapse onto the sampled outcome and are renormalized.

    Args:
        qdev: the qintsim.QuantumDevice to measure.
        mask: bitmask of the qubits to read, all qubits when None.
        generator (torch.Generator, optional): source of randomness.

    Returns:
        the value read for each batch.
    """
    marginal = qdev.marginal_probs(mask)
    outcome = torch.multinomial(marginal.cpu(), 1, generator=generator)
    outcome = outcome.squeeze(-1).tolist()

    qdev.project(mask, outcome)
    return outcome


def register_amplitudes(qdev, mask: Optional[int] = None, batch_id=0):
    """Amplitudes of the masked qubits indexed by the value they encode.

    Amplitudes of basis states that only differ in unmasked qubits are
    summed, so the result is only meaningful when the unmasked qubits are in
    a basis state.
    """
    return qdev.marginal_amplitudes(mask, batch_id).cpu()


def draw_amplitudes(qdev, mask: Optional[int] = None, batch_id=0, ax=None):
    """Bar chart of the amplitude magnitudes of the masked qubits, coloured
    by phase.
    """
    amplitudes = register_amplitudes(qdev, mask, batch_id)
    magnitude = amplitudes.abs().numpy()
    phase = np.angle(amplitudes.numpy())

    if ax is None:
        _, ax = plt.subplots()
    colors = matplotlib.colormaps["hsv"]((phase % (2 * np.pi)) / (2 * np.pi))
    ax.bar(np.arange(len(magnitude)), magnitude, color=colors)
    ax.set_xlabel("register value")
    ax.set_ylabel("magnitude")
    ax.set_title("amplitudes (colour: phase)")
    return ax
