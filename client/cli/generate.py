import argparse
import sys
from client.sdk.client import GatewayClient, GatewayRequestError


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a text-generation request to the gateway")
    parser.add_argument(
        "--url",
        type=str,
        default="http://localhost:8080",
        help="Gateway URL (default: http://localhost:8080)",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        required=True,
        help="Input prompt text",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=None,
        help="Maximum tokens to generate (gateway default: 4000)",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Sampling temperature (gateway default: 0.7)",
    )
    parser.add_argument(
        "--model-id",
        type=str,
        default=None,
        help="Display name of the model endpoint",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=60,
        help="Request timeout in seconds (default: 60)",
    )

    args = parser.parse_args()

    client = GatewayClient(base_url=args.url, timeout=args.timeout)

    try:
        response = client.generate(
            prompt=args.prompt,
            max_tokens=args.max_tokens,
            temperature=args.temperature,
            model_id=args.model_id,
        )
    except GatewayRequestError as e:
        print(f"ERROR ({e.status_code}): {e.message}", file=sys.stderr)
        sys.exit(1)
    except (TimeoutError, ConnectionError) as e:
        print(f"ERROR: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Model: {response.model}")
    print(response.completion)


if __name__ == "__main__":
    main()
