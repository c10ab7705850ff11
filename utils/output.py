from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from functions.benchmark import BenchmarkResult
from libs.bech32 import Decoded

console = Console()


def show_banner(project_name: str) -> None:
    console.print(Panel.fit(f"[bold cyan]{project_name}[/bold cyan]\nBIP173 label + payload codec", border_style="cyan"))


def decoded_table(serial: str, decoded: Decoded) -> Table:
    table = Table(title=serial, show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("label", decoded.label)
    table.add_row("payload", decoded.payload.hex() or "-")
    table.add_row("padding", str(decoded.padding))
    table.add_row("bits", str(decoded.bit_length))
    return table


def benchmark_table(results: list[BenchmarkResult]) -> Table:
    table = Table(title="Benchmark")
    table.add_column("operation", style="bold")
    table.add_column("rounds", justify="right")
    table.add_column("ns/op", justify="right")
    table.add_column("ops/s", justify="right")
    for r in results:
        table.add_row(r.name, str(r.rounds), f"{r.ns_per_op:,.0f}", f"{r.ops_per_sec:,.0f}")
    return table
