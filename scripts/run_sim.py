from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import pygame

from mars_rover.config import SimConfig
from mars_rover.render import PygameRenderer
from mars_rover.session import Simulation
from telemetry.logger import TelemetryLogger


def main() -> None:
    parser = argparse.ArgumentParser(description="Mars rover simulator with keyboard and button controls.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/sim.yaml",
        help="Path to sim YAML config.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the obstacle field (overrides config).",
    )
    args = parser.parse_args()

    cfg = SimConfig.from_file(args.config)
    if args.seed is not None:
        cfg.seed = args.seed

    telemetry = TelemetryLogger(cfg.telemetry_path) if cfg.telemetry_path else None
    sim = Simulation(config=cfg, telemetry=telemetry)

    renderer = PygameRenderer(
        obstacles=sim.get_obstacles(),
        grid_size=cfg.grid_size,
        panel_height=cfg.render.panel_height,
        show_graticule=cfg.render.show_graticule,
        graticule_lines=cfg.render.graticule_lines,
        collision_message_frames=cfg.render.collision_message_frames,
    )

    print(f"Obstacles: {len(sim.get_obstacles())}, collision threshold {cfg.collision_threshold:.1f} deg")
    print("Controls: F forward, B backward, L rotate left, R rotate right, ESC to quit.")

    running = True
    while running:
        for event in pygame.event.get():
            cmd = None
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    cmd = renderer.command_for_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cmd = renderer.command_for_click(event.pos)

            if cmd is not None:
                result = sim.command(cmd)
                if result.collision:
                    print(f"{result.message} (at lat={result.state.lat:.2f}, lon={result.state.lon:.2f})")
                    renderer.show_message(result.message or "")

        renderer.draw(sim.get_state(), sim.to_dict())
        renderer.tick(cfg.render.fps)

    renderer.close()
    if telemetry is not None:
        telemetry.close()


if __name__ == "__main__":
    main()
