# settings_generator.py
from __future__ import annotations

import argparse
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List

import catalog
from keyboard_and_plugboard import ALPHABET
from settings import Settings, save_settings

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> Dict[str, str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, len(ALPHABET) // 2)
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return dict(list(zip(pool[::2], pool[1::2]))[:k])


def generate(
    rng: Random | SystemRandom,
    *,
    n_rotors: int = 3,
    n_plugs: int = 10,
    reflector: str | None = None,
) -> Settings:
    rotors = catalog.names(fixed=False)
    if not 1 <= n_rotors <= len(rotors):
        raise ValueError(f"Rotor count must be 1-{len(rotors)}")
    if reflector is None:
        reflector = rng.choice(catalog.names(fixed=True))
    elif not catalog.lookup(reflector).fixed:
        raise ValueError(f"{reflector!r} is not a reflector")

    wheels: List[tuple] = [(name, rng.randrange(len(ALPHABET))) for name in rng.sample(rotors, n_rotors)]
    wheels.append((reflector, 0))
    return Settings(wheels, choose_pairs(n_plugs, rng))


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a daily settings document")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--rotors", type=int, default=3, help="Number of moving wheels (default: 3)")
    p.add_argument("--plugs", type=int, default=10, help="Number of plug pairs (default: 10)")
    p.add_argument("--reflector", help="Reflector name (default: random)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("settings.yaml"),
        help="Destination file, .yaml or .json (default: settings.yaml)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    rng = build_rng(args.seed)
    try:
        settings = generate(rng, n_rotors=args.rotors, n_plugs=args.plugs, reflector=args.reflector)
    except ValueError as e:
        raise SystemExit(f"Aborted: {e}")

    save_settings(settings, args.outfile)
    names = [name for name, _ in settings.wheels]
    print(f"Wrote {args.outfile}\n"
        f"   wheels      : {names}\n"
        f"   plug pairs  : {len(settings.plugs)}")


if __name__ == "__main__":
    main()
