"""
HashBench CLI
==============

Click-based command-line interface for the hashing benchmark.

Usage::

    python -m hashbench hash "hello"
    python -m hashbench hash "hello" --salt world --algorithm sha512
    python -m hashbench hash "hello" -a bcrypt --cost 12
    python -m hashbench hash "hello" -a argon2id --salt c2FsdHNhbHQ= --memory 19456 --iterations 2
    python -m hashbench -o json suite "hello" --salt c2FsdHNhbHQ=

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import click

from shared.config import AppConfig
from shared.console import BenchConsole

from hashbench import __version__
from hashbench.core.engine import HashBenchEngine
from hashbench.core.models import (
    AlgorithmKind,
    BCryptVariant,
    HashRequest,
    Md5Variant,
    Sha256Variant,
    Sha512Variant,
)
from hashbench.output.console import BenchConsoleOutput
from hashbench.parsers.params import argon2_variant_from_text


def _run_async(coro):
    """Run an async coroutine from synchronous Click handlers."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop and loop.is_running():
        import concurrent.futures
        with concurrent.futures.ThreadPoolExecutor() as pool:
            return pool.submit(asyncio.run, coro).result()
    return asyncio.run(coro)


def _build_variant(
    kind: AlgorithmKind,
    cost: int,
    memory: str,
    iterations: str,
    parallelism: str,
):
    if kind is AlgorithmKind.SHA256:
        return Sha256Variant()
    if kind is AlgorithmKind.SHA512:
        return Sha512Variant()
    if kind is AlgorithmKind.MD5:
        return Md5Variant()
    if kind is AlgorithmKind.BCRYPT:
        return BCryptVariant(cost=cost)
    return argon2_variant_from_text(memory, iterations, parallelism)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a HashBench configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and log output.",
)
@click.version_option(__version__, prog_name="hashbench")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """HashBench -- Multi-Algorithm Hashing Benchmark.

    Hash text with SHA-256, SHA-512, MD5, BCrypt or Argon2id and report
    the average execution time over repeated runs.
    """
    ctx.ensure_object(dict)

    app_config = AppConfig.load(config) if config else AppConfig()
    if quiet:
        app_config.global_settings.console_logging = False

    console = BenchConsole(quiet=quiet or output == "json")
    display = BenchConsoleOutput(console)
    engine = HashBenchEngine(
        app_config,
        on_validation_error=display.display_validation_error,
    )
    ctx.call_on_close(engine.close)

    ctx.obj["config"] = app_config
    ctx.obj["output_format"] = output
    ctx.obj["console"] = console
    ctx.obj["display"] = display
    ctx.obj["engine"] = engine

    if not quiet and output == "console":
        console.banner(version=__version__)


def _parameter_options(func):
    """Salt and per-algorithm parameter options shared by subcommands."""
    options = [
        click.option("--salt", "-s", default=None,
                     help=("Salt as Base64 or plain text. Argon2id requires one of "
                           "at least 8 bytes after decoding, e.g. c2FsdHNhbHQ=.")),
        click.option("--cost", type=int, default=None,
                     help="BCrypt work factor (default 10)."),
        click.option("--memory", default=None,
                     help="Argon2id memory in KiB (default 65536, minimum 8192)."),
        click.option("--iterations", default=None,
                     help="Argon2id iteration count (default 3)."),
        click.option("--parallelism", default=None,
                     help="Argon2id lanes (default 2)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _emit(ctx: click.Context) -> None:
    engine: HashBenchEngine = ctx.obj["engine"]
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(engine.results.to_list(), indent=2, ensure_ascii=False))
    else:
        ctx.obj["display"].display_results(engine.results)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command("hash")
@click.argument("text")
@click.option(
    "--algorithm", "-a",
    type=click.Choice([k.value for k in AlgorithmKind]),
    default=AlgorithmKind.SHA256.value,
    help="Hashing scheme (default sha256).",
)
@_parameter_options
@click.pass_context
def hash_text(
    ctx: click.Context,
    text: str,
    algorithm: str,
    salt: Optional[str],
    cost: Optional[int],
    memory: Optional[str],
    iterations: Optional[str],
    parallelism: Optional[str],
) -> None:
    """Hash TEXT with one algorithm and time it."""
    settings = ctx.obj["config"].hashbench
    engine: HashBenchEngine = ctx.obj["engine"]
    console: BenchConsole = ctx.obj["console"]

    variant = _build_variant(
        AlgorithmKind(algorithm),
        settings.bcrypt_cost if cost is None else cost,
        settings.argon2_memory if memory is None else memory,
        settings.argon2_iterations if iterations is None else iterations,
        settings.argon2_parallelism if parallelism is None else parallelism,
    )
    request = HashRequest(input_text=text, salt_text=salt, variant=variant)

    with console.status("Hashing..."):
        result = _run_async(engine.submit(request))

    if result is None:
        console.warning("Input text is empty; nothing to hash.")
        return

    _emit(ctx)
    if ctx.obj["output_format"] == "console" and engine.last_measurement is not None:
        ctx.obj["display"].display_spread(result.algorithm, engine.last_measurement)


@cli.command()
@click.argument("text")
@_parameter_options
@click.pass_context
def suite(
    ctx: click.Context,
    text: str,
    salt: Optional[str],
    cost: Optional[int],
    memory: Optional[str],
    iterations: Optional[str],
    parallelism: Optional[str],
) -> None:
    """Hash TEXT with every algorithm, one after another."""
    settings = ctx.obj["config"].hashbench
    engine: HashBenchEngine = ctx.obj["engine"]
    console: BenchConsole = ctx.obj["console"]

    requests = [
        HashRequest(
            input_text=text,
            salt_text=salt,
            variant=_build_variant(
                kind,
                settings.bcrypt_cost if cost is None else cost,
                settings.argon2_memory if memory is None else memory,
                settings.argon2_iterations if iterations is None else iterations,
                settings.argon2_parallelism if parallelism is None else parallelism,
            ),
        )
        for kind in AlgorithmKind
    ]

    with console.status("Running benchmark suite..."), engine.logger.timed("suite run"):
        delivered = _run_async(engine.submit_many(requests))

    if not delivered:
        console.warning("Input text is empty; nothing to hash.")
        return
    _emit(ctx)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the HashBench CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
