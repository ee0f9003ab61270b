"""Evaluation configuration."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass
class EvalConfig:
    """Configuration for benchmark runs."""

    # Paths
    data_path: Path = Path(__file__).parent / "data" / "benchmark.csv"
    results_dir: Path = Path(__file__).parent / "results"

    # Execution settings
    delay_between_queries: float = 1.0
    timeout_per_query: float = 30.0

    # Run identification
    run_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"))

    @property
    def output_path(self) -> Path:
        """Path for results JSON."""
        return self.results_dir / f"{self.run_id}_benchmark.json"
