import argparse
import sys

import torch
import matplotlib.pyplot as plt

from torchpack.utils.config import configs
from torchpack.utils.logging import logger

from qintsim import QCEngine, draw_amplitudes


def load_configs(description: str, default_config: str):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "config", metavar="FILE", nargs="?", default=default_config, help="config file"
    )
    parser.add_argument(
        "--print-configs", action="store_true", help="print ALL configs"
    )
    args, opts = parser.parse_known_args()

    configs.load(args.config, recursive=True)
    configs.update(opts)

    logger.info(" ".join([sys.executable] + sys.argv))
    if args.print_configs:
        logger.info(f"\n{configs}")
    return configs


def build_engine(configs) -> QCEngine:
    if configs.run.device == "gpu":
        device = torch.device("cuda")
    elif configs.run.device == "cpu":
        device = torch.device("cpu")
    else:
        raise ValueError(configs.run.device)

    return QCEngine(
        device=device,
        comp_method=configs.run.comp_method,
        record_op=configs.run.record_op,
        seed=configs.run.seed,
    )


def show(qc: QCEngine, signal, title: str):
    logger.info(f"{title}: {signal}\n{qc.describe(signal.mask)}")
    if configs.output.draw:
        ax = draw_amplitudes(qc.qdev, signal.mask)
        ax.set_title(title)
        plt.show()
