"""Songs and the two orderings used to list them through a priority queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from dsquiz.heap import PriorityQueue


@dataclass
class Song:
    """A song with its play count."""

    artist: str
    title: str
    count: int

    def __str__(self) -> str:
        return f"Artist: {self.artist} Title: {self.title} count: {self.count}"


def by_artist_title_count(a: Song, b: Song) -> bool:
    """Heap ordering that brings the smallest artist, title, count to the top."""
    if a.artist != b.artist:
        return a.artist > b.artist
    if a.title != b.title:
        return a.title > b.title
    return a.count > b.count


def by_count_artist_title(a: Song, b: Song) -> bool:
    """Heap ordering that brings the highest count to the top, ties by artist then title."""
    if a.count != b.count:
        return a.count < b.count
    if a.artist != b.artist:
        return a.artist > b.artist
    return a.title > b.title


def order_songs(songs: Iterable[Song]) -> tuple[list[Song], list[Song]]:
    """List the songs in artist-title-count order and in count-artist-title order."""
    songs = list(songs)
    first = PriorityQueue(songs, less=by_artist_title_count)
    second = PriorityQueue(songs, less=by_count_artist_title)
    return list(first.drain()), list(second.drain())