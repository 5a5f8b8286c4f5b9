"""
Template Filler

<<placeholder>> handling for rich text templates. The editor stores
placeholders either plain or HTML escaped (&lt;&lt;name&gt;&gt;),
sometimes wrapped in a <span class="dynamic-field"> chip.
"""

# Python Packages
import re


PLACEHOLDER_PATTERN = re.compile(r"(?:<<|&lt;&lt;)(.+?)(?:>>|&gt;&gt;)")


DYNAMIC_FIELDS = {
    "transaction": [
        {"placeholder": "<<transaction number>>", "label": "Transaction Number", "type": "text"},
        {"placeholder": "<<contract price>>", "label": "Contract Purchase Price", "type": "number"},
        {"placeholder": "<<contract date>>", "label": "Contract Date", "type": "date"},
        {"placeholder": "<<sale type>>", "label": "Sale Type", "type": "text"},
        {"placeholder": "<<seller name>>", "label": "Seller Name", "type": "text"},
        {"placeholder": "<<buyer name>>", "label": "Buyer Name", "type": "text"},
        {"placeholder": "<<property address>>", "label": "Property Address", "type": "text"},
        {"placeholder": "<<closing agent>>", "label": "Closing Agent", "type": "text"}
    ],
    "exchange": [
        {"placeholder": "<<exchange number>>", "label": "Exchange Number", "type": "text"},
        {"placeholder": "<<tax account name>>", "label": "Tax Account Name", "type": "text"},
        {"placeholder": "<<day 45 date>>", "label": "Day 45 Date", "type": "date"},
        {"placeholder": "<<day 180 date>>", "label": "Day 180 Date", "type": "date"},
        {"placeholder": "<<total sale proceeds>>", "label": "Total Sale Proceeds", "type": "number"},
        {"placeholder": "<<total purchase>>", "label": "Total Purchase", "type": "number"},
        {"placeholder": "<<exchange status>>", "label": "Exchange Status", "type": "text"}
    ],
    "property": [
        {"placeholder": "<<property address>>", "label": "Property Address", "type": "text"},
        {"placeholder": "<<property type>>", "label": "Property Type", "type": "text"},
        {"placeholder": "<<property value>>", "label": "Property Value", "type": "number"},
        {"placeholder": "<<legal description>>", "label": "Legal Description", "type": "textarea"}
    ],
    "eat": [
        {"placeholder": "<<eat number>>", "label": "EAT Number", "type": "text"},
        {"placeholder": "<<eat name>>", "label": "EAT Name", "type": "text"},
        {"placeholder": "<<total acquired value>>", "label": "Total Acquired Property Value", "type": "number"},
        {"placeholder": "<<total parked value>>", "label": "Total Parked Property Value", "type": "number"},
        {"placeholder": "<<day 45 date>>", "label": "Day 45 Date", "type": "date"},
        {"placeholder": "<<day 180 date>>", "label": "Day 180 Date", "type": "date"},
        {"placeholder": "<<eat state>>", "label": "EAT State", "type": "text"},
        {"placeholder": "<<eat status>>", "label": "EAT Status", "type": "text"}
    ]
}


def extract_dynamic_fields(html: str) -> list:
    """
    Placeholders in order of first appearance, escaped ones normalized
    (&lt;&lt;x&gt;&gt; -> <<x>>)
    """

    fields = []

    for match in PLACEHOLDER_PATTERN.finditer(html or ""):
        placeholder = f"<<{match.group(1)}>>"

        if placeholder not in fields:
            fields.append(placeholder)

    return fields


def escape_placeholder(placeholder: str) -> str:
    return placeholder.replace("<", "&lt;").replace(">", "&gt;")


def fill_placeholders(html: str, values: dict) -> str:
    """
    Replace each placeholder with its value

    Per placeholder, in this order:
        1. <span ... class="...dynamic-field..." ...>&lt;&lt;x&gt;&gt;</span>
        2. &lt;&lt;x&gt;&gt;
        3. <<x>>
    """

    content = html or ""

    for placeholder, value in (values or {}).items():
        text = "" if value is None else str(value)
        escaped = re.escape(escape_placeholder(placeholder))

        span = re.compile(
            r'<span[^>]*class="[^"]*dynamic-field[^"]*"[^>]*>' + escaped + r"</span>",
            re.IGNORECASE
        )

        content = span.sub(lambda _: text, content)
        content = re.sub(escaped, lambda _: text, content)
        content = content.replace(placeholder, text)

    return content
