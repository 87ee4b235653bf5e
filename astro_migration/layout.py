"""Write the shared Astro layout component."""

from __future__ import annotations

from pathlib import Path

from .models import MigrationConfig

LAYOUT_TEMPLATE = """---
const {
  title,
  description,
  keywords,
  image,
  site_name,
  route
} = Astro.props;

const url = Astro.url.origin + route;
---

<!DOCTYPE html>
<html lang="zh-CN">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{title}</title>
    <meta name="description" content={description} />
    <meta name="keywords" content={keywords} />

    <!-- Open Graph -->
    <meta property="og:title" content={title} />
    <meta property="og:description" content={description} />
    <meta property="og:type" content="website" />
    <meta property="og:url" content={url} />
    <meta property="og:image" content={image} />
    <meta property="og:site_name" content={site_name} />

    <!-- Twitter Card -->
    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:title" content={title} />
    <meta name="twitter:description" content={description} />
    <meta name="twitter:image" content={image} />
    <meta name="twitter:url" content={url} />

    <!-- Structured data -->
    <script type="application/ld+json" set:html={JSON.stringify({
      '@context': 'https://schema.org',
      '@type': 'WebSite',
      'name': site_name,
      'url': url,
      'description': description,
      'inLanguage': 'zh-CN',
      'image': image
    })} />

    <!-- Stylesheets -->
    <link rel="stylesheet" href="/css/global.css" />
    <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/themes/prism.min.css" />
  </head>
  <body>
    <div class="left-menu">
      <h3>uview-plus 组件文档</h3>
      <ul id="menu"></ul>
    </div>
    <div class="main-content">
      <slot />
    </div>
    <div class="right-phone">
      <div class="right-phone-inner">
        <iframe
          id="iframeId"
          src="https://uview-plus.jiangruyi.com/h5/#/"
          width="100%"
          height="90%"
          frameborder="0"
        ></iframe>
      </div>
    </div>

    <!-- Scripts -->
    <script src="https://cdnjs.cloudflare.com/ajax/libs/prism/1.29.0/prism.min.js"></script>
    <script is:inline src="/js/app.js"></script>
  </body>
</html>"""


def write_layout(config: MigrationConfig) -> Path:
    """Write the layout component and return its path."""

    layout_path = config.layout_path()
    layout_path.parent.mkdir(parents=True, exist_ok=True)
    layout_path.write_text(LAYOUT_TEMPLATE, encoding="utf-8")
    print(f"✅ Layout component written: {layout_path}")
    return layout_path
