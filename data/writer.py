import time
from pathlib import Path
from typing import Iterable, Union


class PhoneBookWriter:
    """Writes phone book records or queries as UTF-8 text, one per line."""

    def __init__(self, filepath: Union[str, Path]):
        self.filepath = Path(filepath)

    def write_lines(self, lines: Iterable[str], batch_size: int = 100_000) -> int:
        """Write lines in batches and return how many were written."""
        print(f"Writing lines to {self.filepath}...")
        start_time = time.time()

        count = 0
        batch = []
        with open(self.filepath, "w", encoding="utf-8") as f:
            for line in lines:
                batch.append(line)
                count += 1

                if len(batch) >= batch_size:
                    self._write_batch(batch, f)
                    batch.clear()

            # Write remaining batch
            if batch:
                self._write_batch(batch, f)

        elapsed = time.time() - start_time
        print(f"Writing complete! {count:,} lines in {elapsed:.1f}s")
        return count

    def _write_batch(self, batch, f):
        f.write("".join(f"{line}\n" for line in batch))
