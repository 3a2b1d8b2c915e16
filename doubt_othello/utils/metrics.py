"""Metrics logging utilities."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import csv
import os
from datetime import datetime


class MetricsLogger:
    """CSV logger: one row per call to :meth:`log_dict`."""

    def __init__(self, log_dir: str = "data/logs", prefix: str = "metrics"):
        """
        Initialize metrics logger.
        
        Args:
            log_dir: Directory to save logs
            prefix: File name prefix
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)
        
        self.metrics = defaultdict(list)
        self.current_step = 0
        
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.csv_path = os.path.join(log_dir, f"{prefix}_{timestamp}.csv")
        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = None
        self.csv_fieldnames = ["step"]

    def log_dict(self, metrics_dict: Dict[str, Any], step: Optional[int] = None) -> None:
        """
        Log multiple metrics at once.
        
        Args:
            metrics_dict: Dictionary of metric names to values
            step: Step number (uses the internal counter if None)
        """
        if step is None:
            step = self.current_step
        
        new_fields = [key for key in metrics_dict.keys() if key not in self.csv_fieldnames]
        if new_fields:
            self.csv_fieldnames.extend(new_fields)
            if self.csv_writer is not None:
                # Rewrite the file under the widened header
                self.csv_file.close()
                with open(self.csv_path, "r", newline="") as f:
                    existing_data = list(csv.DictReader(f))
                self.csv_file = open(self.csv_path, "w", newline="")
                self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
                self.csv_writer.writeheader()
                for row in existing_data:
                    self.csv_writer.writerow({field: row.get(field) for field in self.csv_fieldnames})
            else:
                self.csv_writer = csv.DictWriter(self.csv_file, fieldnames=self.csv_fieldnames)
                self.csv_writer.writeheader()
        
        row = {"step": step}
        for field in self.csv_fieldnames[1:]:
            row[field] = metrics_dict.get(field)
        self.csv_writer.writerow(row)
        self.csv_file.flush()
        
        for key, value in metrics_dict.items():
            self.metrics[key].append((step, value))
        self.current_step = step + 1

    def get_metric(self, key: str) -> List[tuple]:
        """
        Get all logged values for a metric.
        
        Args:
            key: Metric name
            
        Returns:
            List of (step, value) tuples
        """
        return self.metrics.get(key, [])

    def close(self) -> None:
        """Close the logger and CSV file."""
        if self.csv_file:
            self.csv_file.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
