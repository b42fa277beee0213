import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import requests
import plotly.graph_objects as go

from config import config

CATEGORIES = ["environmental", "social", "governance"]


def error_detail(response) -> str:
    """Error message from an API response, JSON or not"""
    try:
        return response.json().get("detail", "Failed to analyze the content")
    except ValueError:
        return response.text or f"Request failed with status {response.status_code}"


def main():
    st.title("ESG Content Analyzer")

    source = st.radio("Source", ["URL", "Text"], horizontal=True)
    if source == "URL":
        payload = {"url": st.text_input("Page URL", placeholder="https://example.com/sustainability")}
    else:
        payload = {"text": st.text_area("Text", height=200)}

    if st.button("Analyze") and any(payload.values()):
        with st.spinner("Analyzing..."):
            response = requests.post(f"{config.API_URL}/analyze", json=payload, timeout=config.FETCH_TIMEOUT + 30)

        if response.status_code != 200:
            st.error(error_detail(response))
            st.stop()

        data = response.json()
        sentiment = data["sentiment"]

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Overall Score", f"{data['score']}/100")
        with col2:
            st.metric("Overall Sentiment", sentiment["overall"]["label"],
                      f"{sentiment['overall']['confidence'] * 100:.1f}% confidence")
        st.write(data["summary"])

        scores = []
        for category in CATEGORIES:
            st.subheader(f"{category.capitalize()} Factors")
            st.write(data[category])
            result = sentiment[category]
            st.caption(
                f"Sentiment: {result['label']} | Confidence: {result['confidence'] * 100:.1f}% "
                f"| Score: {result['score'] * 100:.1f}%"
            )
            for snippet in data["negativeSnippets"][category]:
                st.warning(snippet)
            scores.append(int(data[category].split("/")[0].replace("Score: ", "")))

        # Simple radar chart
        fig = go.Figure()
        fig.add_trace(go.Scatterpolar(
            r=scores,
            theta=[c.capitalize() for c in CATEGORIES],
            fill='toself',
            name="Relevance"
        ))

        fig.update_layout(
            polar=dict(radialaxis=dict(visible=True, range=[0, 100])),
            showlegend=True
        )

        st.plotly_chart(fig)


if __name__ == "__main__":
    main()
