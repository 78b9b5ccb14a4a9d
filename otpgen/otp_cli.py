#!/usr/bin/env python3
"""
otp_cli.py — CLI wrapper around otp_core.py

Subcommands:
- hotp     : HOTP code for a given counter
- totp     : TOTP code for now (or --time), plus seconds left in the step
- validate : check whether a configuration is sane (exit status 0/1)

The secret is Base32, taken from --secret or the OTPGEN_SECRET
environment variable. It is never written anywhere.

eg..:
    otpgen hotp --secret GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ --counter 1
    otpgen totp --digits 8 --period 60 --algorithm sha256 --verbose
    otpgen validate --period 30 --digits 6
"""

import argparse
import os
import sys
import time

from . import otp_core
from .types import Algorithm, Counter, Timer

SECRET_ENV = "OTPGEN_SECRET"


def log(msg: str, verbose: bool):
    if verbose:
        print(f"[+] {msg}")


def _secret_from_args(args) -> bytes:
    secret_b32 = args.secret or os.environ.get(SECRET_ENV)
    if not secret_b32:
        raise ValueError(f"No secret given. Use --secret or set {SECRET_ENV}.")
    return otp_core.decode_base32_secret(secret_b32)


# --- CLI command handlers ---
def cmd_help(args):
    print("No command specified. Use -h for help.")
    return 0


def cmd_hotp(args):
    secret = _secret_from_args(args)
    counter = otp_core.resolve_counter(Counter(args.counter), 0)
    log(f"HOTP: HMAC-{args.algorithm.name}(key=secret, msg=counter={counter})", args.verbose)
    code = otp_core.generate_password(args.algorithm, args.digits, secret, counter)
    print(f"HOTP(counter={counter}): {code}")
    return 0


def cmd_totp(args):
    secret = _secret_from_args(args)
    now = args.time if args.time is not None else time.time()
    counter = otp_core.resolve_counter(Timer(args.period), now)
    remaining = int(args.period - (now % args.period))
    log(f"TOTP: time={now}, period={args.period}, counter={counter}", args.verbose)
    code = otp_core.generate_password(args.algorithm, args.digits, secret, counter)
    print(f"TOTP: {code}  (valid ~{remaining:2d}s)")
    return 0


def cmd_validate(args):
    if args.period is not None:
        factor = Timer(args.period)
    else:
        factor = Counter(args.counter)
    ok = otp_core.validate(factor, b"", args.algorithm, args.digits)
    print("valid" if ok else "invalid")
    return 0 if ok else 1


# --- Argparse builder ---
def _add_common(p: argparse.ArgumentParser):
    p.add_argument("--digits", type=int, default=otp_core.DEFAULT_DIGITS, help="Number of OTP digits")
    p.add_argument("--algorithm", type=Algorithm.from_name, default=Algorithm.SHA1,
                   help="HMAC algorithm: SHA1, SHA256 or SHA512")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="otpgen", description="HOTP/TOTP generator (RFC 4226 / RFC 6238)")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # hotp
    ph = sub.add_parser("hotp", help="Generate HOTP code for a specific counter")
    ph.add_argument("--counter", type=int, required=True)
    ph.add_argument("--secret", help=f"Base32 secret (default: ${SECRET_ENV})")
    ph.add_argument("--verbose", action="store_true", help="Verbose output")
    _add_common(ph)
    ph.set_defaults(func=cmd_hotp)

    # totp
    pt = sub.add_parser("totp", help="Generate TOTP code for the current (or given) time")
    pt.add_argument("--period", type=float, default=otp_core.DEFAULT_TIME_STEP, help="TOTP time step (seconds)")
    pt.add_argument("--time", type=float, help="Unix timestamp to use instead of now")
    pt.add_argument("--secret", help=f"Base32 secret (default: ${SECRET_ENV})")
    pt.add_argument("--verbose", action="store_true", help="Verbose output")
    _add_common(pt)
    pt.set_defaults(func=cmd_totp)

    # validate
    pv = sub.add_parser("validate", help="Check a generator configuration")
    factor = pv.add_mutually_exclusive_group(required=True)
    factor.add_argument("--counter", type=int, help="HOTP counter factor")
    factor.add_argument("--period", type=float, help="TOTP period factor (seconds)")
    _add_common(pv)
    pv.set_defaults(func=cmd_validate)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
