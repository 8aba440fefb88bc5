from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

# Characters MediaWiki's wfUrlencode leaves unescaped in titles.
TITLE_SAFE_CHARS = ";@$!*(),/~:"


def encode_title(title: str) -> str:
    return quote(title.strip().replace(" ", "_"), safe=TITLE_SAFE_CHARS)


class CommonsURIGenerator(BaseModel):
    wiki: str = "https://commons.wikimedia.org/wiki"
    category_namespace: str = "Category"

    model_config = ConfigDict(frozen=True)

    def page_uri(self, title: str) -> str:
        return f"{self.wiki}/{encode_title(title)}"

    def category_uri(self, category_name: str) -> str:
        return f"{self.wiki}/{self.category_namespace}:{encode_title(category_name)}"
