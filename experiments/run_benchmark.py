#!/usr/bin/env python3
"""
Accuracy and Timing Benchmark for the Unitary FFT

For every configured (dtype, N) pair this script measures:
  1. Relative error against scipy.fft.fft(norm="ortho")
  2. Round-trip error of inverse(forward(x))
  3. Parseval energy ratio
  4. Forward transform time vs scipy (ms per call)

Usage:
    python run_benchmark.py [--config CONFIG_PATH] [--output OUTPUT_DIR]
"""

import sys
import json
import argparse
import time
from pathlib import Path
from datetime import datetime
from typing import Dict, List
from dataclasses import dataclass, asdict

import numpy as np
from scipy import fft as scipy_fft

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.panel import Panel
from rich import box

from dsp_fft import ComplexArray, forward
from dsp_fft.metrics import relative_error, round_trip_error, energy_ratio
from dsp_fft.utils import setup_logging, log_section, load_config, set_seed, get_seed_from_config

console = Console()


@dataclass
class BenchmarkResult:
    """Accuracy and timing for one (dtype, N) pair."""
    dtype: str
    n: int
    relative_error: float  # vs scipy ortho
    round_trip_error: float
    energy_ratio: float
    time_ms: float  # ours, per forward call
    time_std_ms: float
    scipy_time_ms: float
    passed: bool

    def to_dict(self) -> Dict:
        return asdict(self)


def random_sequence(rng: np.random.Generator, n: int, dtype: str) -> ComplexArray:
    return ComplexArray.from_parts(rng.standard_normal(n), rng.standard_normal(n), dtype=dtype)


def time_forward(x: ComplexArray, n_iter: int):
    """Mean and std of forward() wall time in ms."""
    times = []

    # Warm up (JIT compile for this dtype)
    _ = forward(x)

    for _ in range(n_iter):
        start = time.perf_counter()
        _ = forward(x)
        times.append((time.perf_counter() - start) * 1000)

    return float(np.mean(times)), float(np.std(times))


def time_scipy(z: np.ndarray, n_iter: int) -> float:
    _ = scipy_fft.fft(z, norm="ortho")
    start = time.perf_counter()
    for _ in range(n_iter):
        _ = scipy_fft.fft(z, norm="ortho")
    return (time.perf_counter() - start) / n_iter * 1000


def measure(rng: np.random.Generator, n: int, dtype: str, n_iter: int, tolerance: float) -> BenchmarkResult:
    """Measure all metrics for one size and precision."""
    x = random_sequence(rng, n, dtype)
    z = x.to_complex().astype(np.complex128)

    rel_err = relative_error(forward(x), scipy_fft.fft(z, norm="ortho"))
    rt_err = round_trip_error(x)
    ratio = energy_ratio(x)

    time_ms, time_std = time_forward(x, n_iter)
    scipy_ms = time_scipy(z, n_iter)

    return BenchmarkResult(
        dtype=dtype,
        n=n,
        relative_error=rel_err,
        round_trip_error=rt_err,
        energy_ratio=ratio,
        time_ms=time_ms,
        time_std_ms=time_std,
        scipy_time_ms=scipy_ms,
        passed=rel_err < tolerance,
    )


def display_results_table(results: List[BenchmarkResult]):
    table = Table(title="FFT Benchmark Results", box=box.ROUNDED)
    table.add_column("dtype", style="bold")
    table.add_column("N", justify="right")
    table.add_column("Rel. Error", justify="right")
    table.add_column("Round Trip", justify="right")
    table.add_column("Energy Ratio", justify="right")
    table.add_column("Ours (ms)", justify="right")
    table.add_column("Scipy (ms)", justify="right")
    table.add_column("Status", justify="center")

    for r in results:
        status = "[green]✓ PASS[/green]" if r.passed else "[red]✗ FAIL[/red]"
        table.add_row(
            r.dtype,
            str(r.n),
            f"{r.relative_error:.2e}",
            f"{r.round_trip_error:.2e}",
            f"{r.energy_ratio:.8f}",
            f"{r.time_ms:.4f}±{r.time_std_ms:.4f}",
            f"{r.scipy_time_ms:.4f}",
            status,
        )

    console.print(table)


def run_benchmark(config_path: str, output_dir: Path) -> List[BenchmarkResult]:
    config = load_config(config_path)

    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(log_file=str(output_dir / 'benchmark.log'), name='benchmark')

    bench_cfg = config.get('benchmark', {})
    sizes = bench_cfg.get('sizes', [2 ** k for k in range(0, 13, 2)])
    dtypes = bench_cfg.get('dtypes', ['float32', 'float64'])
    n_iter = bench_cfg.get('n_iter', 50)
    tolerances = bench_cfg.get('tolerance', {})

    seed = get_seed_from_config(config)
    if seed is None:
        seed = 42
    set_seed(seed)
    rng = np.random.default_rng(seed)

    console.print(Panel.fit(
        "[bold blue]Unitary FFT Benchmark[/bold blue]\n"
        f"Sizes: {sizes}\nDtypes: {dtypes}",
        border_style="blue"
    ))

    log_section(logger, "BENCHMARK CONFIGURATION", {
        'config': config_path,
        'sizes': sizes,
        'dtypes': dtypes,
        'n_iter': n_iter,
        'seed': seed,
    })

    results = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Benchmarking", total=len(sizes) * len(dtypes))

        for dtype in dtypes:
            tolerance = float(tolerances.get(dtype, 1e-5))
            for n in sizes:
                progress.update(task, description=f"[cyan]{dtype} N={n}")

                r = measure(rng, int(n), dtype, n_iter, tolerance)
                results.append(r)

                logger.info(
                    f"{dtype} N={n}: rel_err={r.relative_error:.2e}, rt_err={r.round_trip_error:.2e}, "
                    f"energy={r.energy_ratio:.8f}, time={r.time_ms:.4f}ms"
                )
                if not r.passed:
                    logger.warning(f"{dtype} N={n}: relative error {r.relative_error:.2e} exceeds {tolerance:.1e}")

                progress.update(task, advance=1)

    console.print("\n")
    display_results_table(results)

    results_dict = {
        'timestamp': datetime.now().isoformat(),
        'seed': seed,
        'n_iter': n_iter,
        'results': [r.to_dict() for r in results],
    }

    with open(output_dir / 'results.json', 'w') as f:
        json.dump(results_dict, f, indent=2)

    console.print(f"\n[green]✓[/green] Results saved to {output_dir}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Unitary FFT Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'experiments' / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output directory'
    )
    args = parser.parse_args()

    if args.output:
        output_dir = Path(args.output)
    else:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        output_dir = PROJECT_ROOT / 'experiments' / 'results' / timestamp

    try:
        results = run_benchmark(args.config, output_dir)
        n_failed = sum(not r.passed for r in results)
        if n_failed:
            console.print(Panel.fit(
                f"[bold yellow]{n_failed} configuration(s) exceeded tolerance[/bold yellow]",
                border_style="yellow"
            ))
        else:
            console.print(Panel.fit(
                "[bold green]Benchmark completed![/bold green]",
                border_style="green"
            ))
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
