"""
Command Line Interface for Slide Theme

Provides entry points for:
- slide-theme apply: Apply a theme to a slide document
- slide-theme show: Print a theme's includes and rules
- slide-theme list: List available themes
"""

import sys
import json
import logging
import argparse
from pathlib import Path

from .config import load_document, save_document
from .registry import ThemeRegistry, default_registry
from .theme import apply_theme


def build_registry(args: argparse.Namespace) -> ThemeRegistry:
    """Built-in themes plus any from --themes-dir."""
    registry = default_registry()
    if getattr(args, 'themes_dir', None):
        registry.load_directory(args.themes_dir)
    return registry


def resolve_theme_name(registry: ThemeRegistry, theme: str) -> str:
    """Accept a registered name or a path to a theme file."""
    if theme in registry:
        return theme
    if Path(theme).is_file():
        return registry.load_path(theme).name
    # Let the registry report what is available
    return registry.get(theme).name


def apply_command(args: argparse.Namespace) -> int:
    """Execute apply command."""
    print("=" * 60, file=sys.stderr)
    print("Slide Theme", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    try:
        registry = build_registry(args)
        theme_name = resolve_theme_name(registry, args.theme)
        print(f"Theme: {theme_name}", file=sys.stderr)

        document = load_document(args.input)
        print(f"Loaded {len(document.slides)} slides from {args.input}", file=sys.stderr)

        apply_theme(document, theme_name, registry)

        if args.output:
            save_document(document, args.output, rendered=not args.full)
            print(f"Wrote {args.output}", file=sys.stderr)
        else:
            data = document.to_dict() if args.full else document.render_tree()
            print(json.dumps(data, indent=2))

        return 0

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def show_command(args: argparse.Namespace) -> int:
    """Execute show command."""
    try:
        registry = build_registry(args)
        theme = registry.get(resolve_theme_name(registry, args.theme))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1

    print(f"Theme: {theme.name}")
    if theme.description:
        print(f"  {theme.description}")
    if theme.includes:
        print(f"Includes: {', '.join(theme.includes)}")
    print(f"Rules ({len(theme.rules)}):")
    for i, rule in enumerate(theme.rules, 1):
        print(f"  {i}. {rule.describe()}")
    return 0


def list_command(args: argparse.Namespace) -> int:
    """Execute list command."""
    try:
        registry = build_registry(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for name in registry.names():
        description = registry.get(name).description
        print(f"{name:20} {description}" if description else name)
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='slide-theme',
        description='Slide Theme - Declarative styling rules for slide documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s apply deck.yaml --theme slide-center
  %(prog)s apply deck.json --theme my-theme.yaml --output themed.json
  %(prog)s show slide-center
  %(prog)s list --themes-dir ./themes
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Apply command
    apply_parser = subparsers.add_parser('apply', help='Apply a theme to a slide document')
    apply_parser.add_argument('input', help='Slide document (YAML/JSON)')
    apply_parser.add_argument('--theme', '-t', default='default', help='Theme name or theme file (default: default)')
    apply_parser.add_argument('--themes-dir', help='Directory of extra theme files')
    apply_parser.add_argument('--output', '-o', help='Output file (default: JSON to stdout)')
    apply_parser.add_argument('--full', action='store_true', help='Keep deleted elements (flagged) in the output')
    apply_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS, help='Show detailed output')

    # Show command
    show_parser = subparsers.add_parser('show', help="Print a theme's rules")
    show_parser.add_argument('theme', help='Theme name or theme file')
    show_parser.add_argument('--themes-dir', help='Directory of extra theme files')
    show_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS, help='Show detailed output')

    # List command
    list_parser = subparsers.add_parser('list', help='List available themes')
    list_parser.add_argument('--themes-dir', help='Directory of extra theme files')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    args.verbose = getattr(args, 'verbose', False)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command == 'apply':
        return apply_command(args)
    elif args.command == 'show':
        return show_command(args)
    elif args.command == 'list':
        return list_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
