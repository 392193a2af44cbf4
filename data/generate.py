import argparse
import time
from pathlib import Path
from typing import Iterator, List, Optional

from faker import Faker

from data.writer import PhoneBookWriter
from src.data_structures.entry import parse_entry


class PhoneBookGenerator:
    """Generates "<number> <full name>" phone book records using Faker."""

    def __init__(self, locale: str = "en_US", seed: Optional[int] = None):
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)

    def generate_number(self) -> str:
        return str(self.faker.random_int(min=1_000_000, max=99_999_999))

    def generate_name(self) -> str:
        return self.faker.name()

    def generate_entry(self) -> str:
        """Generate a single directory record."""
        return f"{self.generate_number()} {self.generate_name()}"

    def generate_batch(self, count: int) -> Iterator[str]:
        """Generate a batch of directory records."""
        for _ in range(count):
            yield self.generate_entry()

    def generate_queries(
        self, entries: List[str], count: int, missing_ratio: float = 0.2
    ) -> List[str]:
        """
        Pick query names, mostly from the given records.

        Roughly missing_ratio of the queries are freshly generated names that
        do not appear as a key in entries.
        """
        if not 0.0 <= missing_ratio <= 1.0:
            raise ValueError("missing_ratio must be between 0 and 1")

        names = [parse_entry(entry).key for entry in entries]
        known = set(names)
        queries = []

        for _ in range(count):
            if names and self.faker.random.random() >= missing_ratio:
                queries.append(self.faker.random_element(names))
                continue

            # Give up on this query after 100 colliding names
            for _ in range(100):
                name = self.generate_name()
                if name not in known:
                    queries.append(name)
                    break

        return queries


class PhoneBookStorage:
    """Stores a generated phone book and its query list as text files."""

    def __init__(self, directory_path: Path, find_path: Path):
        self.directory_path = Path(directory_path)
        self.find_path = Path(find_path)

    def store(
        self,
        generator: PhoneBookGenerator,
        total_count: int,
        query_count: int,
        missing_ratio: float = 0.2,
    ) -> None:
        print(f"Generating {total_count:,} entries and {query_count:,} queries...")
        start_time = time.time()

        entries = list(generator.generate_batch(total_count))
        queries = generator.generate_queries(entries, query_count, missing_ratio)

        PhoneBookWriter(self.directory_path).write_lines(entries)
        PhoneBookWriter(self.find_path).write_lines(queries)

        elapsed = time.time() - start_time
        print(f"Generation complete! {total_count:,} entries in {elapsed:.1f}s")

        directory_size = self.directory_path.stat().st_size
        find_size = self.find_path.stat().st_size
        print(
            f"Directory file: {directory_size:,} bytes "
            f"({directory_size / 1024**2:.2f} MB)"
        )
        print(f"Find file: {find_size:,} bytes ({find_size / 1024:.2f} KB)")


def main(argv: Optional[List[str]] = None):
    """Generate a synthetic directory.txt and find.txt."""
    parser = argparse.ArgumentParser(description="Generate phone book test data")
    parser.add_argument(
        "--output-dir", default=str(Path(__file__).parent), help="Output directory"
    )
    parser.add_argument(
        "--entries", type=int, default=100_000, help="Number of directory records"
    )
    parser.add_argument(
        "--queries", type=int, default=500, help="Number of query names"
    )
    parser.add_argument(
        "--missing-ratio",
        type=float,
        default=0.2,
        help="Share of queries that are absent from the directory",
    )
    parser.add_argument("--locale", default="en_US", help="Faker locale for names")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--force", action="store_true", help="Overwrite existing files without asking"
    )
    args = parser.parse_args(argv)

    output_dir = Path(args.output_dir)
    directory_path = output_dir / "directory.txt"
    find_path = output_dir / "find.txt"

    existing = [path for path in (directory_path, find_path) if path.exists()]
    if existing and not args.force:
        names = ", ".join(str(path) for path in existing)
        response = input(f"Output file(s) {names} exist. Overwrite? (y/N): ")
        if response.lower() != "y":
            print("Aborted.")
            return

    generator = PhoneBookGenerator(locale=args.locale, seed=args.seed)
    storage = PhoneBookStorage(directory_path, find_path)

    try:
        storage.store(generator, args.entries, args.queries, args.missing_ratio)
        print("Phone book generation completed successfully!")

    except KeyboardInterrupt:
        print("\nGeneration interrupted by user.")


if __name__ == "__main__":
    main()
