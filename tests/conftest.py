import pytest

from amplience_schema import GeneratorConfig, load_schema


HOST = "https://schema.example.com"

SDL = '''
scalar DateTime

enum Color {
  RED
  GREEN
  BLUE
}

union Teaser = Banner | Article

type Author {
  name: String!
  bio: String
}

type Banner @amplienceContentType(icon: "https://example.com/banner.png", validationLevel: SLOT) {
  heading: String @localized
}

"""A news article"""
type Article @amplienceContentType(hierarchy: true) {
  title: String! @localized
  subtitle: String @localized @text(minLength: 3)
  slug: String! @text(format: "slug", maxLength: 64) @example(items: ["my-slug"]) @sortable @filterable
  kind: String @const(item: "article")
  tags: [String!] @list(minItems: 1, maxItems: 5) @const(items: ["a", "b"])
  color: Color @filterable
  featured: Boolean @localized
  rating: Int @number(minimum: 0, maximum: 5) @sortable
  score: Float @number(minimum: 0.5)
  image: AmplienceImage
  video: AmplienceVideo @localized
  "Who wrote it"
  author: Author
  related: Article @link
  teaser: Teaser
  section: [Section] @children
  internal: String @ignoreAmplience
  publishedAt: DateTime
}

type Section {
  name: String
}
'''


@pytest.fixture
def schema():
    return load_schema(SDL)


@pytest.fixture
def config():
    return GeneratorConfig(schema_host=HOST)


@pytest.fixture
def article(schema):
    return schema.get_type("Article")
