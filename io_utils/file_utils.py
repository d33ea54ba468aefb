# io/file_utils.py
"""
File naming and parameter recording helpers.
"""

import os
import datetime
from typing import Dict


def make_run_dirname(projname: str, path_a: str, path_b: str, outdir: str = "results") -> str:
    base_a = os.path.splitext(os.path.basename(path_a))[0]
    base_b = os.path.splitext(os.path.basename(path_b))[0]
    timestamp = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
    run_dir = os.path.join(outdir, f"{projname}_{base_a}_vs_{base_b}_{timestamp}")
    os.makedirs(run_dir, exist_ok=True)
    return run_dir


def make_result_filename(
    projname: str,
    input_path: str,
    desc: str,
    threshold: float,
    ext: str = "png",
    outdir: str = ".",
) -> str:
    base = os.path.splitext(os.path.basename(input_path))[0]
    safe_desc = str(desc).replace(" ", "_")
    fname = f"{projname}_{base}_t-{threshold}_{safe_desc}.{ext}"
    os.makedirs(outdir, exist_ok=True)
    return os.path.join(outdir, fname)


def save_parameters_txt(outdir: str, params: Dict):
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, "parameters.txt")
    with open(path, "w", encoding="utf-8") as f:
        for k, v in params.items():
            f.write(f"{k}: {v}\n")
    return path
