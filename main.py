import argparse
import logging
import sys

import params
from errors import SecretSharingError
from params import SharingSetup
from shamir import reconstruct, split_secret

logger = logging.getLogger(__name__)


def configure_logging(level=params.LOG_LEVEL):
    root = logging.getLogger()
    if root.handlers:
        # leave an existing setup (application, test runner) alone
        return
    root.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s'
    ))
    root.addHandler(handler)


def build_parser():
    parser = argparse.ArgumentParser(description="Shamir Secret Sharing Demo")
    parser.add_argument("-n", "--num-shares", type=int, default=params.DEFAULT_NUM_SHARES,
                        help=f"Number of shares to generate, must be >= threshold (default: {params.DEFAULT_NUM_SHARES})")
    parser.add_argument("-t", "--threshold", type=int, default=params.DEFAULT_THRESHOLD,
                        help=f"Threshold for secret reconstruction, must be <= shares (default: {params.DEFAULT_THRESHOLD})")
    parser.add_argument("-p", "--prime", default="secp256k1",
                        help="Field modulus: a number (0x prefix for hex) or one of "
                             f"{', '.join(params.supported_primes())} (default: secp256k1)")
    parser.add_argument("-m", "--mode", choices=SharingSetup.supported_modes(), default=params.DEFAULT_MODE,
                        help="How share x-coordinates are chosen (default: sequential)")
    parser.add_argument("-s", "--secret", type=params.parse_int, default=None,
                        help="Secret to share; a random one is drawn if omitted")
    parser.add_argument("--check-prime", action="store_true",
                        help="Verify that the modulus is prime before use")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    if args.threshold < 1:
        parser.error("Threshold must be at least 1.")
    if args.threshold > args.num_shares:
        parser.error("Threshold cannot be greater than the number of shares.")

    try:
        setup = SharingSetup(
            args.threshold, args.num_shares, args.prime, args.mode, args.check_prime
        ).generate_sharing_setup()
    except SecretSharingError as exc:
        parser.error(exc.message)

    print(f"=== Shamir Secret Sharing ({setup.threshold} of {setup.num_shares}) ===")
    print(f"Prime: {setup.prime}\n")

    try:
        shares = split_secret(args.secret, setup.threshold, setup.num_shares,
                              setup.prime, setup.mode)
        print("Shares:")
        for i, share in enumerate(shares, 1):
            print(f"Share {i}: {tuple(share)}")
        print()

        # Reconstruct from the first t shares and from all of them
        from_threshold = reconstruct(shares[:setup.threshold], setup.prime, setup.threshold)
        from_all = reconstruct(shares, setup.prime, setup.threshold)
    except SecretSharingError as exc:
        logger.error("%s", exc.message)
        return 1

    print(f"Reconstructed secret from {setup.threshold} shares: {from_threshold}")
    if args.secret is not None:
        ok = from_threshold == args.secret % setup.prime and from_all == from_threshold
    else:
        ok = from_all == from_threshold
    print("Success" if ok else "Fail")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
