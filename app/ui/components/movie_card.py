"""
Movie recommendation card component.
"""

import streamlit as st


def render_movie_card(recommendation: dict) -> None:
    """
    Render a recommended movie with AI explanation, TMDB facts, cast and links.

    Args:
        recommendation: ``recommendation`` object of the API success envelope
    """
    col1, col2 = st.columns([1, 2])
    with col1:
        if recommendation.get("posterUrl"):
            st.image(recommendation["posterUrl"], use_container_width=True)
        else:
            st.caption("No poster available")
    with col2:
        st.header(recommendation["title"])
        meta = []
        if recommendation.get("releaseDate"):
            meta.append(recommendation["releaseDate"][:4])
        if recommendation.get("runtime"):
            meta.append(f"{recommendation['runtime']} min")
        if recommendation.get("genres"):
            meta.append(", ".join(recommendation["genres"]))
        if meta:
            st.caption(" | ".join(meta))

        st.markdown(
            f"⭐ **{recommendation.get('rating', 0):.1f}**/10 "
            f"({recommendation.get('voteCount', 0):,} votes) · "
            f"Match confidence {recommendation.get('confidenceScore', 0):.0%}"
        )
        if recommendation.get("overview"):
            st.write(recommendation["overview"])

    st.subheader("Why you'll love it")
    st.write(recommendation.get("explanation", ""))
    for reason in recommendation.get("matchReasons", []):
        st.markdown(f"- {reason}")

    cast = recommendation.get("cast") or []
    if cast:
        st.subheader("Cast")
        cols = st.columns(len(cast))
        for col, member in zip(cols, cast):
            with col:
                if member.get("profileUrl"):
                    st.image(member["profileUrl"], use_container_width=True)
                st.markdown(f"**{member['name']}**")
                if member.get("character"):
                    st.caption(member["character"])

    links = [f"[TMDB]({recommendation['tmdbUrl']})"]
    if recommendation.get("imdbUrl"):
        links.append(f"[IMDb]({recommendation['imdbUrl']})")
    st.markdown("Where to learn more: " + " · ".join(links))


def metadata_caption(metadata: dict | None) -> str | None:
    """Caption line for recommendation metadata; None for history re-lookups."""
    if not metadata:
        return None
    return (
        f"{metadata.get('quizType', '')} quiz · {metadata.get('aiModel', '')} · "
        f"{metadata.get('processingTime', 0)} ms"
    )
