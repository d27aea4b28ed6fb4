#!/usr/bin/env python3
"""Run the network animator headlessly over a text file.

Blank-line separated paragraphs of the input file act as the text source,
served in order and cycling. The animator runs at a virtual 60 fps; after
the first network stabilizes a word can be selected to play the full
collapse / hold / rebuild cycle.

Usage:
    # Build and animate the first paragraph for 10 seconds
    uv run python scripts/simulate_network.py texts.txt

    # Select a word once stable, run long enough for the next network
    uv run python scripts/simulate_network.py texts.txt --select network --frames 900

    # Japanese profile on a narrow touch screen, development timeouts
    uv run python scripts/simulate_network.py texts_ja.txt -l ja --width 600 --touch --dev
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

# Add src to path
sys.path.insert(0, str(project_root / "src"))

from tensegrity.animation import EventKind, Phase
from tensegrity.animator import FrameInput, create_state, tick
from tensegrity.config import Settings, get_dev_settings, settings
from tensegrity.generation import GenerationCoordinator
from tensegrity.graph import compute_metrics
from tensegrity.preprocessing import SUPPORTED_LANGUAGES
from tensegrity.viewport import Viewport

logger = logging.getLogger(__name__)

FPS = 60


class ParagraphSource:
    """Serves paragraphs of a file in order, wrapping around."""

    def __init__(self, path: Path) -> None:
        content = path.read_text(encoding="utf-8")
        self.paragraphs = [p.strip() for p in content.split("\n\n") if p.strip()]
        self.index = 0

    async def generate(self, word: str | None, language: str) -> str:
        if not self.paragraphs:
            return ""
        text = self.paragraphs[self.index % len(self.paragraphs)]
        self.index += 1
        return text


def print_network(state) -> None:
    network = state.network
    report = compute_metrics(network, state.profile)
    print(f"Network ({network.language}): {len(network.nodes)} nodes, {len(network.edges)} edges")
    for node in sorted(network.nodes, key=lambda n: n.frequency, reverse=True)[:10]:
        print(f"  {node.word:<20} freq={node.frequency} cluster={node.cluster.value}")
    print(f"Metrics: {json.dumps(report.to_dict(), indent=2)}")


async def simulate(
    text_path: Path,
    language: str,
    frames: int,
    select: str | None,
    width: float,
    height: float,
    touch: bool,
    config: Settings,
) -> None:
    source = ParagraphSource(text_path)
    state = create_state(language, config)
    coordinator = GenerationCoordinator(source, config, clock=lambda: state.frame / FPS)
    viewport = Viewport(width, height)

    await coordinator.request(state)

    phase = state.phase
    pending_select: str | None = None
    selected = False

    for frame in range(1, frames + 1):
        result = tick(state, FrameInput(
            frame=frame,
            now=frame / FPS,
            viewport=viewport,
            language=language,
            touch=touch,
            selected_word=pending_select,
        ))
        pending_select = None

        if state.phase != phase:
            print(f"[{frame:5d}] {phase.value} -> {state.phase.value}")
            phase = state.phase
            if phase == Phase.BIRTH:
                print_network(state)

        for event in result.events:
            print(f"[{frame:5d}] event {event.kind.value}" + (f" ({event.word})" if event.word else ""))
            if event.kind == EventKind.NETWORK_READY and select is not None and not selected:
                word = select
                if state.network.find_word(word) is None and state.network.nodes:
                    word = max(state.network.nodes, key=lambda n: n.frequency).word
                    print(f"'{select}' not in network, selecting '{word}'")
                pending_select = word
                selected = True
            elif event.kind == EventKind.HOLD_COMPLETE:
                await coordinator.request(state, event.word)

    camera = state.viewport.camera
    print(f"Final phase: {state.phase.value}, zoom={camera.zoom:.3f}, "
          f"offset=({camera.offset.x:.1f}, {camera.offset.y:.1f})")
    if state.network.nodes:
        xs = [n.position.x for n in state.network.nodes]
        ys = [n.position.y for n in state.network.nodes]
        print(f"Bounding box: x=[{min(xs):.1f}, {max(xs):.1f}], y=[{min(ys):.1f}, {max(ys):.1f}]")


def main():
    parser = argparse.ArgumentParser(description="Animate word networks headlessly")
    parser.add_argument("text_file", type=Path, help="Text file, paragraphs separated by blank lines")
    parser.add_argument(
        "-l", "--language",
        default=settings.default_language,
        choices=SUPPORTED_LANGUAGES,
        help=f"Language profile (default: {settings.default_language})",
    )
    parser.add_argument(
        "-n", "--frames",
        type=int,
        default=600,
        help="Frames to simulate at 60 fps (default: 600)",
    )
    parser.add_argument(
        "-s", "--select",
        help="Word to select once the first network is stable",
    )
    parser.add_argument("--width", type=float, default=1280.0, help="Viewport width (default: 1280)")
    parser.add_argument("--height", type=float, default=720.0, help="Viewport height (default: 720)")
    parser.add_argument("--touch", action="store_true", help="Use touch-screen chrome metrics")
    parser.add_argument("--dev", action="store_true", help="Use development settings (longer timeouts)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    asyncio.run(simulate(
        text_path=args.text_file,
        language=args.language,
        frames=args.frames,
        select=args.select,
        width=args.width,
        height=args.height,
        touch=args.touch,
        config=get_dev_settings() if args.dev else settings,
    ))


if __name__ == "__main__":
    main()
