#!/usr/bin/env python3
"""
Statistics Collection Script for Robot Simulation
Runs randomly generated missions and collects loss/scent metrics for analysis
"""

import random
import sys
from typing import Dict, List, Optional, Tuple

import numpy as np

from config import DEFAULT_STAT_RUNS, MAX_COORDINATE, MAX_INSTRUCTION_LENGTH, MAX_RANDOM_ROBOTS
from simulation import Simulation
from utils import Command, GridBounds, Orientation, Position, RobotDefinition


def summarize_run(simulation: Simulation) -> Dict[str, float]:
    """Summarize a finished simulation"""
    robots = simulation.robots
    lost = sum(1 for r in robots if r.is_lost)
    executed = np.array([r.commands_executed for r in robots], dtype=float)
    issued = np.array([len(d.commands) for d in simulation.robot_definitions[:len(robots)]], dtype=float)

    return {
        'robots': len(robots),
        'lost': lost,
        'survivors': len(robots) - lost,
        'lost_rate': lost / len(robots) * 100 if robots else 0.0,
        'scents': simulation.grid.scent_count,
        'protected_moves': sum(r.moves_ignored for r in robots),
        'mean_commands_executed': float(np.mean(executed)) if robots else 0.0,
        'max_commands_executed': int(np.max(executed)) if robots else 0,
        # Share of issued commands that were discarded after a robot was lost
        'discarded_rate': float((1 - executed.sum() / issued.sum()) * 100) if issued.sum() else 0.0,
    }


def format_summary(summary: Dict[str, float]) -> str:
    return (
        f"Robots: {summary['robots']} | Lost: {summary['lost']} ({summary['lost_rate']:.1f}%) | "
        f"Scents: {summary['scents']} | Protected moves: {summary['protected_moves']} | "
        f"Mean commands executed: {summary['mean_commands_executed']:.1f}"
    )


def random_mission(rng: random.Random) -> Tuple[GridBounds, List[RobotDefinition]]:
    """Build random grid bounds and robots that pass input validation"""
    bounds = GridBounds(rng.randint(0, MAX_COORDINATE), rng.randint(0, MAX_COORDINATE))

    robots = []
    for _ in range(rng.randint(1, MAX_RANDOM_ROBOTS)):
        position = Position(rng.randint(0, bounds.max_x), rng.randint(0, bounds.max_y))
        orientation = rng.choice(list(Orientation))
        length = rng.randint(1, MAX_INSTRUCTION_LENGTH)
        commands = tuple(rng.choice(list(Command)) for _ in range(length))
        robots.append(RobotDefinition(position, orientation, commands))
    return bounds, robots


def run_single_simulation(rng: random.Random) -> Dict[str, float]:
    """Run a single random mission and return statistics"""
    bounds, robots = random_mission(rng)
    sim = Simulation(bounds, robots)
    sim.run()

    stats = summarize_run(sim)
    stats['grid_cells'] = (bounds.max_x + 1) * (bounds.max_y + 1)
    return stats


def run_statistics(num_runs: int = DEFAULT_STAT_RUNS, seed: Optional[int] = None, show_output: bool = True):
    """Run multiple random missions and print aggregate statistics"""
    rng = random.Random(seed)
    all_stats = [run_single_simulation(rng) for _ in range(num_runs)]

    if show_output and all_stats:
        lost_rates = np.array([s['lost_rate'] for s in all_stats])
        scents = np.array([s['scents'] for s in all_stats])
        protected = np.array([s['protected_moves'] for s in all_stats])
        discarded = np.array([s['discarded_rate'] for s in all_stats])
        cells = np.array([s['grid_cells'] for s in all_stats])

        print("=" * 80)
        print(f"MARS ROBOT STATISTICS ({num_runs} runs)")
        print("=" * 80)
        print("--- LOSSES ---")
        print(f"Lost Rate: {np.mean(lost_rates):.1f}% ± {np.std(lost_rates):.1f}")
        print(f"  Min: {np.min(lost_rates):.1f}% | Max: {np.max(lost_rates):.1f}% | Median: {np.median(lost_rates):.1f}%")
        print(f"Discarded Commands: {np.mean(discarded):.1f}% ± {np.std(discarded):.1f}")
        print()
        print("--- SCENTS ---")
        print(f"Average Scents per Run: {np.mean(scents):.2f} ± {np.std(scents):.2f}")
        print(f"Average Protected Moves per Run: {np.mean(protected):.2f}")
        # corrcoef is undefined for a constant series
        if np.std(cells) > 0 and np.std(lost_rates) > 0:
            print(f"Grid Size / Lost Rate Correlation: {np.corrcoef(cells, lost_rates)[0, 1]:.2f}")
        print("=" * 80)

    return all_stats


def main():
    """Main entry point"""
    num_runs = DEFAULT_STAT_RUNS
    if len(sys.argv) > 1:
        try:
            num_runs = int(sys.argv[1])
        except ValueError:
            print(f"Invalid argument. Using default: {num_runs} runs")

    run_statistics(num_runs)


if __name__ == "__main__":
    main()
