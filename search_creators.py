#!/usr/bin/env python3
"""
Creator Search Script for a JSON catalog export
Runs a catalog query against a creator listing file and prints the results
"""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from app.config import settings
from app.core.query_engine import CatalogQueryEngine
from app.core.sorting import use_system_collation
from app.core.state import default_query_state
from app.models.creator import CreatorRecord
from app.models.search import QueryState
from app.services.catalog_provider import CatalogFetchError, JSONFileCatalogProvider
from app.api.v1.search import creator_to_dict


def load_catalog(path: Optional[str] = None) -> List[CreatorRecord]:
    """Load the creator listing from disk"""
    provider = JSONFileCatalogProvider(path or settings.CATALOG_PATH)
    return provider.get_all()


def format_result(result: dict) -> str:
    """Format a query result for display"""
    output = []
    output.append(f"Name: {result.get('name') or 'N/A'}")
    output.append(f"Genre: {result.get('genre') or 'N/A'}")
    output.append(f"Platform: {result.get('platform') or 'N/A'}")
    output.append(f"Location: {result.get('location')}")
    output.append(f"Followers: {result.get('followers_formatted')}")
    output.append(f"Total Views: {result.get('total_views_formatted')}")
    if result.get('pricing'):
        output.append(f"Pricing: {result['pricing']}")
    if result.get('tags'):
        output.append(f"Tags: {', '.join(result['tags'])}")
    return "\n".join(output)


def main():
    """Main function"""
    parser = argparse.ArgumentParser(description="Query a creator catalog JSON export")
    parser.add_argument("search", nargs="?", default="", help="Search term (name, tag or genre)")
    parser.add_argument("--catalog", help="Path to the catalog JSON file")
    parser.add_argument("--genre", help="Genre pre-filter (default: all creators)")
    parser.add_argument("--platform", default="All", help="Platform filter (default: All)")
    parser.add_argument("--location", default="All", help="Location filter (default: All)")
    parser.add_argument("--price", nargs=2, type=float, metavar=("MIN", "MAX"), help="Price range")
    parser.add_argument("--followers", nargs=2, type=float, metavar=("MIN", "MAX"),
                        help="Followers range in thousands")
    parser.add_argument("--sort", default="followers", help="followers | views | price | name")
    parser.add_argument("--options", action="store_true", help="Print the available filter options and exit")
    parser.add_argument("--json", action="store_true", help="Output results in JSON format")
    parser.add_argument("--limit", type=int, default=10, help="Limit number of results (default: 10)")

    args = parser.parse_args()
    use_system_collation()

    try:
        records = load_catalog(args.catalog)
    except CatalogFetchError as e:
        print(f"Error loading catalog: {e}")
        sys.exit(2)

    engine = CatalogQueryEngine(records)

    if args.options:
        options = engine.options_for_genre(args.genre)
        print(f"Platforms: {', '.join(options.platforms)}")
        print(f"Locations: {', '.join(options.locations)}")
        print(f"Genres: {', '.join(options.genres)}")
        print(f"Price ceiling: {options.bounds.price_max:g}")
        print(f"Followers ceiling (K): {options.bounds.followers_max:g}")
        return

    overrides = {
        "search_term": args.search,
        "platform": args.platform,
        "location": args.location,
        "sort_key": args.sort,
    }
    if args.price:
        overrides["price_range"] = tuple(args.price)
    if args.followers:
        overrides["followers_range"] = tuple(args.followers)

    try:
        defaults = default_query_state(engine.options.bounds)
        state = QueryState.model_validate({**defaults.model_dump(), **overrides})
    except ValidationError as e:
        print(f"Invalid query: {e}")
        sys.exit(2)

    results = [creator_to_dict(record) for record in engine.query(state, genre=args.genre)]

    if not results:
        print("No creators found.")
        sys.exit(1)

    print(f"Found {len(results)} creator(s):")
    print("=" * 50)

    if args.limit and len(results) > args.limit:
        results = results[:args.limit]
        print(f"Showing first {args.limit} results:")

    if args.json:
        print(json.dumps(results, indent=2, default=str))
    else:
        for i, result in enumerate(results, 1):
            print(f"\nResult {i}:")
            print("-" * 30)
            print(format_result(result))


if __name__ == "__main__":
    main()
