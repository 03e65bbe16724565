from typing import Any, Iterable


def extract_genre_ids(movie: dict[str, Any]) -> set[int]:
    """
    Genre ids of a provider movie payload.

    List endpoints (trending, search) carry "genre_ids"; the details
    endpoint carries "genres" as [{"id": ..., "name": ...}].
    """
    if movie.get("genre_ids"):
        return set(movie["genre_ids"])
    return {
        genre["id"] for genre in movie.get("genres") or []
        if isinstance(genre, dict) and "id" in genre
    }


def rank_by_genre_overlap(
        trending: list[dict[str, Any]],
        favorite_genre_ids: Iterable[int],
) -> list[dict[str, Any]]:
    """
    Order trending movies by how many genres they share with the user's
    favorites, most shared first.

    The sort is stable, so movies with the same overlap keep their trending
    order. Without any favorite genres the list is returned as is.
    """
    genre_ids = set(favorite_genre_ids)
    if not genre_ids:
        return list(trending)
    return sorted(
        trending,
        key=lambda movie: len(extract_genre_ids(movie) & genre_ids),
        reverse=True,
    )
