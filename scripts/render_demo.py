#!/usr/bin/env python3
"""Render the demo function signature under a dotted width ruler."""

from __future__ import annotations

import argparse

from prettypy import NEWLINE, Doc, RenderOptions, indent, parameters, run_render, text

DEMO_PARAMETERS = (
    "proposal: ProposedViewSize",
    "subviews: Subviews",
    "cache: inout ()",
)


def build_demo(params: tuple[str, ...] = DEMO_PARAMETERS) -> Doc:
    arguments = parameters([text(param) for param in params])
    return (
        text("func hello(")
        + arguments
        + text(") {")
        + indent(NEWLINE + text('print("Hello")'))
        + NEWLINE
        + text("}")
    )


def show(doc: Doc, width: int, options: RenderOptions) -> None:
    result = run_render(doc, width, options)
    print("." * width)
    print(result.text)
    for diagnostic in result.diagnostics:
        print(f"  {diagnostic.severity}: {diagnostic.message}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the demo document at one or more widths")
    parser.add_argument("--width", type=int, default=20, help="Target width (default: 20)")
    parser.add_argument(
        "--max-width",
        type=int,
        default=0,
        help="Render every width from --width up to this one (0 = only --width)",
    )
    parser.add_argument("--tab-width", type=int, default=4, help="Spaces per indent level (default: 4)")
    parser.add_argument(
        "--param",
        action="append",
        default=None,
        help="Parameter text; repeat to replace the default parameter list",
    )
    args = parser.parse_args()

    if args.width < 0:
        raise SystemExit(f"Invalid --width: {args.width}")

    options = RenderOptions(tab_width=args.tab_width)
    doc = build_demo(tuple(args.param) if args.param else DEMO_PARAMETERS)

    last_width = max(args.width, args.max_width)
    for width in range(args.width, last_width + 1):
        if width != args.width:
            print()
        print(f"[width={width}]")
        show(doc, width, options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
