"""JSON report of a minification run."""

import json
from datetime import datetime
from pathlib import Path

from javaminify import __version__
from javaminify.models.results import MinifyResult, result_to_dict
from javaminify.models.run import RunConfiguration


def write_report(result: MinifyResult, config: RunConfiguration, output_path: Path) -> None:
    """Write the run summary next to the options that produced it."""
    report = {
        "version": "1.0",
        "metadata": {
            "javaminify_version": __version__,
            "generated_at": datetime.now().isoformat(),
            "input": str(config.input_dir),
            "output": str(config.output_dir),
            "packages": list(config.packages),
        },
        **result_to_dict(result),
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
