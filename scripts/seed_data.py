#!/usr/bin/env python3
"""
Sample data seeding script for the Multiblog API.

Loads a small multi-blog dataset (3 blogs, 4 authors, 6 categories, 7 tags,
9 posts, 3 comments) by making HTTP requests to the API endpoints, so every
row goes through the same validation as client traffic.

Usage:
    python scripts/seed_data.py [--api-url http://localhost:8000] [--dry-run] [--verbose]
"""

import argparse
import sys
from collections import defaultdict
from typing import Any, Dict, List, Optional

import httpx

BLOGS = [
    {"key": 1, "Name": "Tech Thoughts", "Slug": "tech-thoughts", "Description": "Personal essays on software, devops, and tooling", "Url": "https://tech.example.com"},
    {"key": 2, "Name": "Travel Diaries", "Slug": "travel-diaries", "Description": "Stories and guides from trips around the world", "Url": "https://travel.example.com"},
    {"key": 3, "Name": "Food & Recipes", "Slug": "food-recipes", "Description": "Recipes, reviews, and kitchen tips", "Url": "https://food.example.com"},
]

AUTHORS = [
    {"key": 1, "blog": 1, "Name": "Ava Martin", "Email": "ava@tech.example.com", "ProfileUrl": "https://tech.example.com/authors/ava", "Bio": "Engineer and writer."},
    {"key": 2, "blog": 1, "Name": "Liam Chen", "Email": "liam@tech.example.com", "ProfileUrl": "https://tech.example.com/authors/liam", "Bio": "DevOps enthusiast."},
    {"key": 3, "blog": 2, "Name": "Sofia Rossi", "Email": "sofia@travel.example.com", "ProfileUrl": "https://travel.example.com/authors/sofia", "Bio": "Backpacker and photographer."},
    {"key": 4, "blog": 3, "Name": "Mateo Garcia", "Email": "mateo@food.example.com", "ProfileUrl": "https://food.example.com/authors/mateo", "Bio": "Home cook and recipe developer."},
]

CATEGORIES = [
    {"key": 1, "blog": 1, "Name": "Programming", "Slug": "programming"},
    {"key": 2, "blog": 1, "Name": "DevOps", "Slug": "devops"},
    {"key": 3, "blog": 2, "Name": "Guides", "Slug": "guides"},
    {"key": 4, "blog": 2, "Name": "Destinations", "Slug": "destinations"},
    {"key": 5, "blog": 3, "Name": "Recipes", "Slug": "recipes"},
    {"key": 6, "blog": 3, "Name": "Reviews", "Slug": "reviews"},
]

TAGS = [
    {"key": 1, "Name": "sql"},
    {"key": 2, "Name": "azure"},
    {"key": 3, "Name": "travel-tips"},
    {"key": 4, "Name": "italy"},
    {"key": 5, "Name": "dinner"},
    {"key": 6, "Name": "baking"},
    {"key": 7, "Name": "devops"},
]

POSTS = [
    {"key": 101, "blog": 1, "author": 1, "category": 1, "tags": [1, 7], "Title": "Designing Resilient Databases", "Slug": "designing-resilient-databases", "Content": "A short guide on transactional design, backups, and sharding strategies.", "Excerpt": "Resilient DB design fundamentals.", "PublishedAt": "2022-07-15T09:00:00Z", "IsPublished": 1, "Views": 1245, "ExternalId": "ext-101"},
    {"key": 102, "blog": 1, "author": 2, "category": 2, "tags": [7, 2], "Title": "CI/CD for Small Teams", "Slug": "ci-cd-small-teams", "Content": "Practical CI/CD pipelines using minimal infrastructure and automation.", "Excerpt": "CI/CD recommendations.", "PublishedAt": "2023-02-02T14:30:00Z", "IsPublished": 1, "Views": 842, "ExternalId": "ext-102"},
    {"key": 103, "blog": 2, "author": 3, "category": 3, "tags": [3], "Title": "Packing Light: Essentials for a Two-Week Trip", "Slug": "packing-light-essentials", "Content": "What to pack and what to leave behind when traveling light.", "Excerpt": "Packing essentials for two weeks.", "PublishedAt": "2021-11-05T06:45:00Z", "IsPublished": 1, "Views": 560, "ExternalId": "ext-103"},
    {"key": 104, "blog": 2, "author": 3, "category": 4, "tags": [3, 4], "Title": "Florence in 48 Hours", "Slug": "florence-in-48-hours", "Content": "A weekend plan to see the highlights of Florence.", "Excerpt": "Weekend Florence itinerary.", "PublishedAt": "2020-09-14T18:00:00Z", "IsPublished": 1, "Views": 1720, "ExternalId": "ext-104"},
    {"key": 105, "blog": 3, "author": 4, "category": 5, "tags": [5], "Title": "One-Pan Lemon Chicken", "Slug": "one-pan-lemon-chicken", "Content": "Easy one-pan recipe with bright lemon and herbs.", "Excerpt": "Simple lemon chicken recipe.", "PublishedAt": "2022-04-22T17:30:00Z", "IsPublished": 1, "Views": 430, "ExternalId": "ext-105"},
    {"key": 106, "blog": 3, "author": 4, "category": 6, "tags": [6], "Title": "Best Non-Stick Pans 2023", "Slug": "best-non-stick-pans-2023", "Content": "A comparative review of popular non-stick pans.", "Excerpt": "Top non-stick pans review.", "PublishedAt": "2023-01-10T11:00:00Z", "IsPublished": 1, "Views": 210, "ExternalId": "ext-106"},
    {"key": 107, "blog": 1, "author": 1, "category": 1, "tags": [1], "Title": "Practical SQL Window Functions", "Slug": "practical-sql-windows", "Content": "Examples and use cases for window functions in reporting.", "Excerpt": "Window functions for reporting.", "PublishedAt": "2024-03-08T07:00:00Z", "IsPublished": 1, "Views": 320, "ExternalId": "ext-107"},
    {"key": 108, "blog": 2, "author": 3, "category": 4, "tags": [3], "Title": "Hidden Beaches of Portugal", "Slug": "hidden-beaches-portugal", "Content": "A list of lesser-known beaches and how to get there.", "Excerpt": "Off-the-beaten-path beaches.", "PublishedAt": "2023-06-18T12:00:00Z", "IsPublished": 1, "Views": 910, "ExternalId": "ext-108"},
    {"key": 109, "blog": 3, "author": 4, "category": 5, "tags": [6], "Title": "Sourdough Starter 101", "Slug": "sourdough-starter-101", "Content": "How to create and maintain a sourdough starter at home.", "Excerpt": "Beginner sourdough guide.", "PublishedAt": "2021-08-01T05:30:00Z", "IsPublished": 1, "Views": 1290, "ExternalId": "ext-109"},
]

COMMENTS = [
    {"post": 101, "AuthorName": "Jane Doe", "AuthorEmail": "jane@example.com", "Content": "Great overview, helped me redesign our backup plan.", "IsApproved": 1, "ExternalId": "c-ext-1001"},
    {"post": 104, "AuthorName": "Luca", "AuthorEmail": "luca@example.it", "Content": "Thanks for the Florence tips, saved me a day!", "IsApproved": 1, "ExternalId": "c-ext-1002"},
    {"post": 109, "AuthorName": "Emma", "AuthorEmail": "emma@example.com", "Content": "My starter came alive on day 5, awesome guide.", "IsApproved": 1, "ExternalId": "c-ext-1003"},
]


# ANSI color codes for terminal output
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


class SeedingStats:
    """Track statistics during the seeding process."""

    def __init__(self):
        self.created = defaultdict(int)
        self.failed = defaultdict(int)
        self.errors: List[str] = []

    def record_created(self, entity_type: str):
        self.created[entity_type] += 1

    def record_failed(self, entity_type: str, error: str):
        self.failed[entity_type] += 1
        self.errors.append(f"{entity_type}: {error}")


class DataSeeder:
    """Creates the sample dataset through the public API, mapping sample keys to new IDs."""

    def __init__(self, api_url: str, dry_run: bool = False, verbose: bool = False):
        self.api_url = api_url.rstrip("/")
        self.dry_run = dry_run
        self.verbose = verbose
        self.stats = SeedingStats()
        self.ids: Dict[str, Dict[int, int]] = defaultdict(dict)
        self.client = httpx.Client(base_url=f"{self.api_url}/api", timeout=10.0)

    def post(self, entity_type: str, path: str, payload: Dict[str, Any], id_field: str) -> Optional[int]:
        if self.dry_run:
            print(f"{Colors.YELLOW}[dry-run]{Colors.RESET} POST /api{path} {payload}")
            return None

        try:
            response = self.client.post(path, json=payload)
        except httpx.HTTPError as e:
            self.stats.record_failed(entity_type, str(e))
            print(f"{Colors.RED}✗{Colors.RESET} {entity_type}: {e}")
            return None

        if response.status_code >= 400:
            error = response.json().get("error", response.text)
            self.stats.record_failed(entity_type, error)
            print(f"{Colors.RED}✗{Colors.RESET} {entity_type}: {error}")
            return None

        self.stats.record_created(entity_type)
        created = response.json()
        if self.verbose:
            print(f"{Colors.GREEN}✓{Colors.RESET} {entity_type} #{created[id_field]}")
        return created[id_field]

    def remember(self, entity_type: str, key: int, new_id: Optional[int]):
        if new_id is not None:
            self.ids[entity_type][key] = new_id

    @staticmethod
    def fields(row: Dict[str, Any]) -> Dict[str, Any]:
        """Wire fields of a sample row (PascalCase keys only)."""
        return {k: v for k, v in row.items() if k[:1].isupper()}

    def seed_blogs(self):
        for blog in BLOGS:
            self.remember("blog", blog["key"], self.post("Blog", "/blogs", self.fields(blog), "BlogId"))

    def seed_authors(self):
        for author in AUTHORS:
            payload = {**self.fields(author), "BlogId": self.ids["blog"].get(author["blog"])}
            self.remember("author", author["key"], self.post("Author", "/authors", payload, "AuthorId"))

    def seed_categories(self):
        for category in CATEGORIES:
            payload = {**self.fields(category), "BlogId": self.ids["blog"].get(category["blog"])}
            self.remember("category", category["key"], self.post("Category", "/categories", payload, "CategoryId"))

    def seed_tags(self):
        for tag in TAGS:
            self.remember("tag", tag["key"], self.post("Tag", "/tags", self.fields(tag), "TagId"))

    def seed_posts(self):
        for post in POSTS:
            payload = {
                **self.fields(post),
                "BlogId": self.ids["blog"].get(post["blog"]),
                "AuthorId": self.ids["author"].get(post["author"]),
                "CategoryId": self.ids["category"].get(post["category"]),
                "tags": [self.ids["tag"][t] for t in post["tags"] if t in self.ids["tag"]],
            }
            self.remember("post", post["key"], self.post("Post", "/posts", payload, "PostId"))

    def seed_comments(self):
        for comment in COMMENTS:
            payload = {**self.fields(comment), "PostId": self.ids["post"].get(comment["post"])}
            self.post("Comment", "/comments", payload, "CommentId")

    def run(self) -> int:
        print(f"\n{Colors.BOLD}{Colors.CYAN}Seeding {self.api_url}{Colors.RESET}\n")

        self.seed_blogs()
        self.seed_authors()
        self.seed_categories()
        self.seed_tags()
        self.seed_posts()
        self.seed_comments()
        self.client.close()

        for entity_type, count in self.stats.created.items():
            print(f"{Colors.GREEN}✓{Colors.RESET} {entity_type}: {count} created")
        for entity_type, count in self.stats.failed.items():
            print(f"{Colors.RED}✗{Colors.RESET} {entity_type}: {count} failed")

        return 1 if self.stats.errors else 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the Multiblog API with sample data")
    parser.add_argument("--api-url", default="http://localhost:8000", help="Base URL of the running API")
    parser.add_argument("--dry-run", action="store_true", help="Print requests without sending them")
    parser.add_argument("--verbose", action="store_true", help="Print every created row")
    args = parser.parse_args()

    seeder = DataSeeder(api_url=args.api_url, dry_run=args.dry_run, verbose=args.verbose)
    sys.exit(seeder.run())


if __name__ == "__main__":
    main()
