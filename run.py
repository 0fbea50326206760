#!/usr/bin/env python3
"""
Unified conformance and benchmark runner for the JS-to-Python regex translator.

Orchestrates:
1. Loading patterns, expected translations and JS-observed results from YAML
2. Translating each pattern and compiling it with the regex module
3. Running cases (correctness) or timing translation and matching (performance)

Usage:
    python run.py test                    # Run all patterns
    python run.py test -n empty_class     # Test specific pattern
    python run.py bench                   # Run all benchmarks
    python run.py bench --iterations 100  # More iterations
"""

import argparse
import io
import json
import sys
import time
from pathlib import Path

import regex
import yaml

from js_regexp import JSRegExp, RegExpError, match, replace
from js_to_py_regex import translate

# Ensure UTF-8 output on Windows
if sys.platform == 'win32':
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

# Paths
ROOT_DIR = Path(__file__).parent
DEFAULT_CONFIG = ROOT_DIR / "config.yaml"


# =============================================================================
# Case Evaluation
# =============================================================================

def run_case(rx: JSRegExp, case: dict) -> tuple[object, object]:
    """Run one case, returning (actual, expected)."""
    text = case.get("input", "")
    if "replacement" in case:
        return replace(text, rx, case["replacement"]), case.get("result")

    result = match(text, rx)
    if result is not None:
        result = list(result)
    return result, case.get("match")


def check_pattern(entry: dict, verbose: bool = False) -> dict:
    """Translate, compile and run every case of one corpus entry."""
    pattern = entry["pattern"]
    flags = entry.get("flags", "")
    results = {
        "name": entry.get("name", "unnamed"),
        "pattern": pattern,
        "translation": translate(pattern, flags),
        "errors": [],
        "cases": [],
    }

    expected = entry.get("translation")
    if expected is not None and expected != results["translation"]:
        results["errors"].append(
            f"translation {results['translation']!r} != expected {expected!r}")

    try:
        regex.compile(results["translation"])
    except regex.error as e:
        results["errors"].append(f"regex rejected {results['translation']!r}: {e}")
        return results

    for i, case in enumerate(entry.get("cases", [])):
        try:
            rx = JSRegExp(pattern, flags)
        except RegExpError as e:
            results["errors"].append(f"case {i}: {e}")
            continue
        actual, wanted = run_case(rx, case)
        passed = actual == wanted
        results["cases"].append({
            "input": case.get("input", ""),
            "actual": actual,
            "expected": wanted,
            "passed": passed,
        })
        if verbose:
            status = "OK" if passed else "FAIL"
            print(f"[{status}] {case.get('input', '')!r} -> {actual!r}")

    results["passed"] = not results["errors"] and all(c["passed"] for c in results["cases"])
    return results


def compare_results(results: dict) -> bool:
    """Report mismatches for one pattern."""
    for error in results["errors"]:
        print(f"\n=== MISMATCH on {results['name']} ===")
        print(f"Pattern: {results['pattern']!r}")
        print(f"  {error}")

    for i, case in enumerate(results["cases"]):
        if not case["passed"]:
            print(f"\n=== MISMATCH on {results['name']} case {i} ===")
            print(f"Input:    {case['input']!r}")
            print(f"Python:   {case['actual']!r}")
            print(f"Expected: {case['expected']!r}")

    return results.get("passed", False)


# =============================================================================
# Benchmarking
# =============================================================================

def bench_pattern(entry: dict, test_strings: list[str], iterations: int) -> dict:
    """Time translation and a global match over the input strings."""
    pattern = entry["pattern"]
    flags = entry.get("flags", "")

    start = time.perf_counter()
    for _ in range(iterations):
        translate(pattern, flags)
    translate_ms = (time.perf_counter() - start) * 1000

    rx = JSRegExp(pattern, "g" + flags.replace("g", ""))
    matches = 0
    start = time.perf_counter()
    for _ in range(iterations):
        for text in test_strings:
            found = match(text, rx)
            matches += len(found) if found else 0
    match_ms = (time.perf_counter() - start) * 1000

    return {
        "name": entry.get("name", "unnamed"),
        "pattern": pattern,
        "iterations": iterations,
        "summary": {
            "total_translate_ms": translate_ms,
            "total_match_ms": match_ms,
            "matches": matches // max(iterations, 1),
        },
    }


def print_summary(results: dict, name: str):
    """Print a formatted benchmark summary."""
    summary = results.get("summary", {})

    print(f"\n{'='*60}")
    print(f"BENCHMARK SUMMARY: {name}")
    print(f"{'='*60}")
    print(f"Total translate time: {summary.get('total_translate_ms', 0):.3f}ms")
    print(f"Total match time:     {summary.get('total_match_ms', 0):.3f}ms")
    print(f"Matches per pass:     {summary.get('matches', 0)}")


def is_output_dir(output: str) -> bool:
    return Path(output).is_dir() or output.endswith('/') or output.endswith('\\')


def save_results(collected: dict, output: str, mode: str):
    """Save JSON results keyed by pattern name.

    A directory receives one <name>_<mode>.json per pattern; a file receives
    every pattern's results in one document.
    """
    output_path = Path(output)
    if not is_output_dir(output):
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(collected, f, indent=2)
        print(f"\nResults saved to: {output_path}")
        return

    output_path.mkdir(parents=True, exist_ok=True)
    for name, results in collected.items():
        pattern_path = output_path / f"{name}_{mode}.json"
        with open(pattern_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to: {pattern_path}")


# =============================================================================
# CLI Commands
# =============================================================================

def load_config(config_path: Path) -> dict:
    """Load and validate the corpus file."""
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        print("Create a config.yaml file or specify one with --config")
        sys.exit(1)

    with open(config_path, encoding='utf-8') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict) or not isinstance(config.get("patterns", []), list):
        print(f"Error: Expected dict in config file with 'inputs' and 'patterns' keys", file=sys.stderr)
        sys.exit(1)

    return config


def list_patterns(config: dict, config_path: Path):
    """List available patterns from the corpus."""
    print(f"Available patterns in {config_path}:")
    for entry in config.get("patterns", []):
        name = entry.get("name", "unnamed")
        pattern = entry.get("pattern", "")[:40]
        flags = entry.get("flags", "")
        print(f"  - {name}: /{pattern}/{flags} ({len(entry.get('cases', []))} cases)")

    print(f"\nAvailable inputs:")
    for input_name, strings in config.get("inputs", {}).items():
        print(f"  - {input_name}: {len(strings)} strings")


def select_patterns(config: dict, name: str = None) -> list[dict]:
    patterns = config.get("patterns", [])
    if name:
        patterns = [p for p in patterns if p.get("name") == name]
    return patterns


def cmd_test(args):
    """Run conformance tests."""
    config = load_config(Path(args.config))

    if args.list:
        list_patterns(config, Path(args.config))
        return 0

    patterns = select_patterns(config, args.name)
    if not patterns:
        if args.name:
            print(f"Error: No pattern named '{args.name}' found")
        else:
            print(f"Error: No patterns in {args.config}")
        return 1

    all_success = True
    collected = {}
    for entry in patterns:
        if "pattern" not in entry:
            print(f"Error: Entry '{entry.get('name', 'unnamed')}' missing 'pattern'", file=sys.stderr)
            all_success = False
            continue

        if args.verbose:
            print(f"\n### Testing: {entry.get('name', 'unnamed')} ###")
        results = check_pattern(entry, args.verbose)
        if not compare_results(results):
            all_success = False
        collected[results["name"]] = results

    if args.output:
        save_results(collected, args.output, "test")

    print(f"\n{'='*60}")
    if all_success:
        print(f"ALL {len(patterns)} TEST(S) PASSED")
    else:
        print(f"SOME TESTS FAILED")
    print(f"{'='*60}")

    return 0 if all_success else 1


def cmd_bench(args):
    """Run benchmarks."""
    config = load_config(Path(args.config))

    if args.list:
        list_patterns(config, Path(args.config))
        return 0

    patterns = select_patterns(config, args.name)
    if not patterns:
        if args.name:
            print(f"Error: No pattern named '{args.name}' found")
        else:
            print(f"Error: No patterns in {args.config}")
        return 1

    inputs_config = config.get("inputs", {})
    iterations = args.iterations if args.iterations else 50
    all_success = True
    collected = {}

    for entry in patterns:
        name = entry.get("name", "unnamed")
        input_names = entry.get("inputs", [])
        if not input_names:
            if args.verbose:
                print(f"Skipping '{name}': no inputs specified", file=sys.stderr)
            continue

        test_strings = []
        for input_name in input_names:
            if input_name not in inputs_config:
                print(f"Error: Input '{input_name}' not found in inputs config", file=sys.stderr)
                all_success = False
                continue
            test_strings.extend(inputs_config[input_name])

        try:
            results = bench_pattern(entry, test_strings, iterations)
        except RegExpError as e:
            print(f"Error: Pattern '{name}': {e}", file=sys.stderr)
            all_success = False
            continue

        print_summary(results, name)
        collected[name] = results

    if args.output:
        save_results(collected, args.output, "benchmark")

    print(f"\n{'='*60}")
    if all_success:
        print(f"ALL {len(collected)} BENCHMARK(S) COMPLETED SUCCESSFULLY")
    else:
        print(f"SOME BENCHMARKS FAILED")
    print(f"{'='*60}")

    return 0 if all_success else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="JS-to-Python regex conformance and benchmark runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  test    Check translations and JS-observed results from the corpus
  bench   Time translation and matching over the corpus inputs

Config file format (YAML):
  inputs:
    html: ["<a href='x'>", "plain text"]
  patterns:
    - name: empty_class
      pattern: "[][a][b]"
      translation: "(?!)[a][b]"
      flags: g
      inputs: [html]
      cases:
        - input: "ab"
          match: null

Examples:
  python run.py test                    # Run all tests
  python run.py test -n empty_class     # Test specific pattern
  python run.py bench --iterations 100  # More iterations
  python run.py bench -o results/       # One JSON file per pattern
  python run.py test -o results.json    # All results in one JSON file
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Common arguments
    def add_common_args(p):
        p.add_argument("--config", "-c", default=str(DEFAULT_CONFIG),
                       help="YAML corpus file (default: config.yaml)")
        p.add_argument("--name", "-n", help="Run only the pattern with this name")
        p.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
        p.add_argument("--list", "-l", action="store_true", help="List available patterns")
        p.add_argument("--output", "-o", help="Save JSON results to file or directory")
        p.add_argument("--iterations", "-i", type=int, help="Number of iterations for bench (default: 50)")

    # Test subcommand
    test_parser = subparsers.add_parser("test", help="Run conformance tests")
    add_common_args(test_parser)
    test_parser.set_defaults(func=cmd_test)

    # Bench subcommand
    bench_parser = subparsers.add_parser("bench", help="Run performance benchmarks")
    add_common_args(bench_parser)
    bench_parser.set_defaults(func=cmd_bench)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
