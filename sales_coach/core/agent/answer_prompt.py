"""
Answer prompt.

Stuff-documents question answering prompt: retrieved knowledge is joined
with blank lines and placed ahead of the question.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answers
"""

from langchain_core.prompts import ChatPromptTemplate

from sales_coach.models.retrieval import RetrievedDocument

CONTEXT_SEPARATOR = "\n\n"

ANSWER_TEMPLATE = """Use the following pieces of context to answer the question at the end. If you don't know the answer, just say that you don't know, don't try to make up an answer.

{context}

Question: {question}
Helpful Answer:"""

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", ANSWER_TEMPLATE),
])


def format_context(documents: list[RetrievedDocument]) -> str:
    """Join document texts with blank lines; empty string when there are none."""
    return CONTEXT_SEPARATOR.join(document.text for document in documents)
