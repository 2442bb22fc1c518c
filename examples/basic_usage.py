"""Basic usage examples for progress-relay."""

import time
from concurrent.futures import ThreadPoolExecutor

from progress_relay import CliProgress, Progress, RendererBinding, Style, send_and_print


def example_plain_callbacks():
    """Example: Progress with plain function callbacks."""
    def on_message(message: str) -> None:
        print(f"[status] {message}")

    def on_position(position: float) -> None:
        print(f"Progress: {position:.1f}%")

    progress = Progress(on_message, on_position).with_len(25.0)
    progress.show_msg("Extracting archive")
    for _ in range(4):
        progress.complete_unit()


def example_download_bar():
    """Example: Byte-based terminal bar for a download."""
    size = 4_000_000
    chunk = 250_000

    with RendererBinding(CliProgress(), total=size, label="Downloading", style=Style.BYTES) as binding:
        progress = binding.progress()
        for _ in range(size // chunk):
            time.sleep(0.05)
            progress.increment_by(chunk / size * 100)
        binding.finish("Download complete")


def example_shared_across_threads():
    """Example: Worker threads sharing one position."""
    files = [f"part{i}.bin" for i in range(8)]

    with RendererBinding(CliProgress(), total=len(files), label="Extracting") as binding:
        progress = binding.progress(length=100 / len(files))

        def extract(name: str, handle: Progress) -> None:
            time.sleep(0.1)
            handle.complete_unit()
            send_and_print(f"Extracted {name}", handle)

        with ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(extract, name, progress.clone()) for name in files]
            for future in futures:
                future.result()


if __name__ == '__main__':
    print("progress-relay Examples")
    print("=" * 50)
    print("\nSee function definitions for usage examples.")
