"""Build the style-transfer prompt for the rewrite step."""

from __future__ import annotations

from article_optimizer.models import Article, ReferenceArticle


def _format_reference(index: int, ref: ReferenceArticle) -> str:
    return f"""REFERENCE ARTICLE {index} (Top Ranking):
Title: {ref.title}
URL: {ref.url}
Content:
{ref.content}"""


def build_rewrite_prompt(article: Article, references: list[ReferenceArticle]) -> str:
    """Return the single user prompt asking the model to rewrite `article` like `references`.

    References are numbered in the order given.
    """
    reference_blocks = "\n\n".join(
        _format_reference(i, ref) for i, ref in enumerate(references, 1)
    )

    return f"""You are an expert content writer and SEO specialist.

TASK: Rewrite the ORIGINAL ARTICLE below to match the style, formatting, and quality of the TOP-RANKING REFERENCE ARTICLES.

ORIGINAL ARTICLE:
Title: {article.title}
Content:
{article.body}

{reference_blocks}

INSTRUCTIONS:
1. Analyze the writing style, tone, structure, and formatting of the reference articles
2. Rewrite the original article to match that style while keeping the same core topic
3. Use similar heading structures (H2, H3) as the reference articles
4. Match the depth and comprehensiveness of the reference articles
5. Improve SEO optimization based on how the reference articles are structured
6. Keep the content engaging, informative, and well-organized
7. Use markdown formatting for headings (##, ###)
8. Make it at least as detailed as the reference articles

OUTPUT FORMAT (in markdown):
# [Improved Title]

[Introduction paragraph]

## [First Main Section]

[Content...]

### [Subsection if needed]

[Content...]

## [Second Main Section]

[Content...]

[Continue with more sections as appropriate...]

## Conclusion

[Concluding thoughts]

---

ONLY output the rewritten article content in markdown format. Do NOT include any meta-commentary or explanations."""
