"""
Group free-text items by meaning.

Texts are embedded by the Cohere embed API and grouped greedily: each item
not yet placed starts a group and pulls in every later unplaced item whose
cosine similarity to it reaches the threshold.
"""

import logging
import math

import requests
from django.conf import settings

from .exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


def fetch_embeddings(texts):
    """Return one embedding vector per text, in order."""
    try:
        response = requests.post(
            settings.COHERE_EMBED_URL,
            json={
                'texts': texts,
                'model': settings.COHERE_EMBED_MODEL,
                'input_type': 'clustering',
            },
            headers={
                'Authorization': f'Bearer {settings.COHERE_API_KEY}',
                'Content-Type': 'application/json',
            },
            timeout=settings.COHERE_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        embeddings = response.json()['embeddings']
    except (requests.RequestException, ValueError, KeyError) as e:
        logger.error("Embedding request failed: %s", e)
        raise EmbeddingProviderError(str(e))

    if len(embeddings) != len(texts):
        logger.error("Embedding provider returned %d vectors for %d texts", len(embeddings), len(texts))
        raise EmbeddingProviderError('Embedding count does not match item count')
    return embeddings


def cosine_similarity(a, b):
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


def group_similar_items(items, embeddings, threshold=None):
    """
    Greedy single-pass grouping.

    Args:
        items: ``[{'text': str, 'price': number}, ...]``
        embeddings: One vector per item, same order.
        threshold: Minimum cosine similarity to join a group; defaults to
            ``settings.SIMILARITY_THRESHOLD``.

    Returns:
        list[dict]: ``name`` (first item's text), ``number_of_pieces``,
        ``total_price``, ``average_price`` (2 decimals) and ``items``.
    """
    if threshold is None:
        threshold = settings.SIMILARITY_THRESHOLD

    used = [False] * len(items)
    groups = []

    for i, item in enumerate(items):
        if used[i]:
            continue
        used[i] = True
        members = [item]

        for j in range(i + 1, len(items)):
            if used[j]:
                continue
            if cosine_similarity(embeddings[i], embeddings[j]) >= threshold:
                members.append(items[j])
                used[j] = True

        total_price = sum(member['price'] for member in members)
        groups.append({
            'name': members[0]['text'],
            'number_of_pieces': len(members),
            'total_price': total_price,
            'average_price': round(total_price / len(members), 2),
            'items': members,
        })

    return groups


def group_items(items):
    embeddings = fetch_embeddings([item['text'] for item in items])
    groups = group_similar_items(items, embeddings)
    logger.info("Grouped %d item(s) into %d group(s)", len(items), len(groups))
    return groups
