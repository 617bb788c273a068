"""
Streamlit UI for the AI Social Poster.
Run with: streamlit run streamlit_app.py
"""

import os

import streamlit as st
import requests

from app.utils.html_format import format_hashtags_html, format_hook_html

# API Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000/api")

# Page config
st.set_page_config(
    page_title="AI Social Poster",
    page_icon="📣",
    layout="wide"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .stButton > button {
        width: 100%;
        background-color: #E1306C;
        color: white;
        font-weight: bold;
        border-radius: 8px;
        padding: 0.5rem 1rem;
    }
    .stButton > button:hover {
        background-color: #B0224F;
    }
    .variant-hook {
        font-size: 1.1rem;
        font-weight: bold;
    }
    .hashtag-badge {
        background-color: #E1306C;
        color: white;
        padding: 2px 10px;
        margin-right: 4px;
        border-radius: 20px;
        font-size: 0.8rem;
    }
</style>
""", unsafe_allow_html=True)

# Header
st.title("📣 AI Social Poster")
st.markdown("Generate ready-to-post marketing copy in seconds")

# Sidebar with API status
with st.sidebar:
    st.header("⚙️ Server")
    st.caption(API_BASE_URL)
    try:
        response = requests.get(f"{API_BASE_URL}/health", timeout=5)
        if response.status_code == 200 and response.json().get("ok"):
            st.success(response.json().get("message", "API is running"))
        else:
            st.warning(f"⚠️ API responded with status {response.status_code}")
    except requests.exceptions.RequestException:
        st.warning("⚠️ API not connected. Start the FastAPI server first.")

# Main content area
col1, col2 = st.columns([1, 1])

with col1:
    st.header("✍️ Create Post")

    topic = st.text_area(
        "Topic",
        placeholder="e.g., Spring sale on handmade candles",
        height=100
    )

    subcol1, subcol2 = st.columns(2)

    with subcol1:
        platform = st.selectbox(
            "📱 Platform",
            options=["instagram", "facebook", "linkedin", "twitter", "tiktok"],
            index=0
        )
        tone = st.selectbox(
            "🎭 Tone",
            options=["friendly", "professional", "playful", "bold", "inspirational"],
            index=0
        )
        language = st.selectbox(
            "🌍 Language",
            options=["en", "es", "fr", "de", "it", "pt"],
            index=0
        )

    with subcol2:
        goal = st.selectbox(
            "🎯 Goal",
            options=["engagement", "sales", "leads", "awareness", "traffic"],
            index=0
        )
        audience = st.selectbox(
            "👥 Audience",
            options=["general", "small_business", "young_adults", "professionals", "parents"],
            index=0
        )
        style = st.selectbox(
            "✉️ Style",
            options=["post", "dm", "email"],
            index=0,
            help="Post = public social post | DM = direct message | Email = short marketing email"
        )

    variants_count = st.slider("Variants", min_value=1, max_value=3, value=3)

    st.subheader("🔧 Options")
    opt_col1, opt_col2, opt_col3 = st.columns(3)

    with opt_col1:
        include_urgency = st.checkbox("Urgency", value=True)
    with opt_col2:
        include_social_proof = st.checkbox("Social Proof", value=True)
    with opt_col3:
        mention_ai = st.checkbox("Mention AI", value=True)

    st.divider()
    generate_clicked = st.button("🚀 Generate Post", use_container_width=True)

with col2:
    st.header("📝 Generated Variants")

    if generate_clicked:
        if not topic.strip():
            st.error("Please enter a topic!")
        else:
            with st.spinner("Generating your posts..."):
                try:
                    payload = {
                        "topic": topic,
                        "platform": platform,
                        "tone": tone,
                        "language": language,
                        "goal": goal,
                        "audience": audience,
                        "style": style,
                        "variantsCount": variants_count,
                        "includeUrgency": include_urgency,
                        "includeSocialProof": include_social_proof,
                        "mentionAI": mention_ai
                    }

                    response = requests.post(
                        f"{API_BASE_URL}/generate-post",
                        json=payload
                    )
                    result = response.json()

                    if response.status_code == 200 and result.get("success"):
                        st.success(f"✅ Generated {result.get('variantsCount', 0)} variant(s)!")

                        for i, variant in enumerate(result.get("variants", []), 1):
                            with st.expander(f"Variant {i}", expanded=(i == 1)):
                                st.markdown(
                                    format_hook_html(variant.get("hook", "")),
                                    unsafe_allow_html=True
                                )
                                st.write(variant.get("caption", ""))
                                hashtags = variant.get("hashtags", [])
                                if hashtags:
                                    st.markdown(
                                        format_hashtags_html(hashtags),
                                        unsafe_allow_html=True
                                    )
                                # Copy-friendly block
                                st.code(
                                    "\n\n".join(filter(None, [variant.get("caption", ""), " ".join(hashtags)])),
                                    language=None
                                )
                    else:
                        error = result.get("error", "Unknown error")
                        details = result.get("details")
                        st.error(f"Error: {error}" + (f" ({details})" if details else ""))

                except requests.exceptions.ConnectionError:
                    st.error("❌ Cannot connect to API. Make sure the FastAPI server is running!")
                except ValueError:
                    st.error("❌ The API returned a response that is not JSON.")
    else:
        st.info("👈 Configure your post settings and click 'Generate Post'")

# Footer
st.divider()
st.markdown("""
<div style="text-align: center; color: #666; font-size: 0.8rem;">
    Made with ❤️ using Streamlit + FastAPI + OpenAI
</div>
""", unsafe_allow_html=True)
