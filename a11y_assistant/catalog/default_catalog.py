"""
Default Issue Catalog
=====================
The built-in issue templates.

Order matters twice: the catalog order feeds the shuffle, and variant order
is selected by index. Reordering or editing any entry changes every report.
"""
from a11y_assistant.models.issue_template import IssueTemplate, Variant


DEFAULT_CATALOG: tuple[IssueTemplate, ...] = (
    IssueTemplate(
        id="img-alt", severity="critical", rule="img-alt",
        standard_reference="WCAG 2.1 – 1.1.1 Non-text Content (Level A)",
        description="Image is missing an alt attribute. Screen readers cannot convey image content to blind users.",
        variants=(
            Variant(element='<img src="/hero.jpg" class="hero-banner">', fix='<img src="/hero.jpg" class="hero-banner" alt="Team collaborating in a bright open-plan office">', file_path="components/Hero.jsx", line=42),
            Variant(element='<img src="/logo.png" class="brand-logo">', fix='<img src="/logo.png" class="brand-logo" alt="Acme Inc. company logo">', file_path="components/Header.jsx", line=18),
            Variant(element='<img src="/product.webp" id="product-img">', fix='<img src="/product.webp" id="product-img" alt="Wireless noise-cancelling headphones in midnight black">', file_path="pages/Product.jsx", line=91),
        ),
    ),
    IssueTemplate(
        id="button-name", severity="critical", rule="button-name",
        standard_reference="WCAG 2.1 – 4.1.2 Name, Role, Value (Level A)",
        description="Button contains only an icon with no accessible name. Keyboard and screen reader users cannot identify its purpose.",
        variants=(
            Variant(element='<button class="close-modal"><svg>...</svg></button>', fix='<button class="close-modal" aria-label="Close modal"><svg aria-hidden="true">...</svg></button>', file_path="components/Modal.jsx", line=118),
            Variant(element='<button class="menu-toggle"><svg>...</svg></button>', fix='<button class="menu-toggle" aria-label="Open navigation menu" aria-expanded="false"><svg aria-hidden="true">...</svg></button>', file_path="components/Nav.jsx", line=34),
            Variant(element='<button class="share-btn"><svg>...</svg></button>', fix='<button class="share-btn" aria-label="Share this article"><svg aria-hidden="true">...</svg></button>', file_path="components/Post.jsx", line=77),
        ),
    ),
    IssueTemplate(
        id="color-contrast", severity="warning", rule="color-contrast",
        standard_reference="WCAG 2.1 – 1.4.3 Contrast Minimum (Level AA)",
        description="Foreground/background color combination fails the minimum contrast ratio of 4.5:1 for normal text.",
        variants=(
            Variant(element='<p class="subtitle" style="color:#9CA3AF;">Subtitle text</p>', fix='<p class="subtitle" style="color:#6B7280;">Subtitle text</p>', file_path="components/Card.jsx", line=77, note="Ratio was 2.85:1 → fixed to 4.63:1"),
            Variant(element='<span class="badge" style="color:#D1D5DB;background:#F9FAFB;">New</span>', fix='<span class="badge" style="color:#374151;background:#F9FAFB;">New</span>', file_path="components/Badge.jsx", line=12, note="Ratio was 1.92:1 → fixed to 7.8:1"),
            Variant(element='<a class="footer-link" style="color:#94A3B8;">Privacy Policy</a>', fix='<a class="footer-link" style="color:#475569;">Privacy Policy</a>', file_path="components/Footer.jsx", line=55, note="Ratio was 3.1:1 → fixed to 5.74:1"),
        ),
    ),
    IssueTemplate(
        id="label", severity="critical", rule="label",
        standard_reference="WCAG 2.1 – 1.3.1 Info and Relationships (Level A)",
        description="Form input has no associated <label> element. Placeholder text disappears on input and is not a substitute.",
        variants=(
            Variant(element='<input type="email" placeholder="Enter your email">', fix='<label for="email">Email address</label>\n<input id="email" type="email" placeholder="Enter your email">', file_path="pages/Signup.jsx", line=203),
            Variant(element='<input type="search" placeholder="Search...">', fix='<label for="search" class="sr-only">Search</label>\n<input id="search" type="search" placeholder="Search...">', file_path="components/SearchBar.jsx", line=9),
            Variant(element='<textarea placeholder="Your message"></textarea>', fix='<label for="msg">Your message</label>\n<textarea id="msg" placeholder="Your message"></textarea>', file_path="pages/Contact.jsx", line=88),
        ),
    ),
    IssueTemplate(
        id="heading-order", severity="warning", rule="heading-order",
        standard_reference="WCAG 2.1 – 1.3.1 Info and Relationships (Level A)",
        description="Heading levels are skipped, disrupting the document outline navigated by screen reader users.",
        variants=(
            Variant(element="<h4>Related Articles</h4>", fix="<h3>Related Articles</h3>", file_path="components/Sidebar.jsx", line=55, note="h2 → h4 skips h3"),
            Variant(element="<h5>Team Members</h5>", fix="<h3>Team Members</h3>", file_path="pages/About.jsx", line=130, note="h2 → h5 skips h3 and h4"),
            Variant(element="<h3>FAQ</h3>", fix="<h2>FAQ</h2>", file_path="pages/Help.jsx", line=22, note="Page starts with h3 — should be h2"),
        ),
    ),
    IssueTemplate(
        id="focus-visible", severity="warning", rule="focus-visible",
        standard_reference="WCAG 2.1 – 2.4.7 Focus Visible (Level AA)",
        description="Focus outline is removed via CSS, making it impossible for keyboard-only users to track where focus is.",
        variants=(
            Variant(element="a.nav-link { outline: none; }", fix="a.nav-link:focus-visible {\n  outline: 2px solid #2563EB;\n  outline-offset: 2px;\n  border-radius: 2px;\n}", file_path="styles/nav.css", line=14),
            Variant(element="button { outline: 0 !important; }", fix="button:focus-visible {\n  outline: 2px solid #7C3AED;\n  outline-offset: 3px;\n}", file_path="styles/global.css", line=38),
            Variant(element=".card:focus { outline: none; }", fix=".card:focus-visible {\n  outline: 2px solid #0EA5E9;\n  outline-offset: 4px;\n  border-radius: 8px;\n}", file_path="components/Card.module.css", line=62),
        ),
    ),
    IssueTemplate(
        id="aria-required-parent", severity="critical", rule="aria-required-parent",
        standard_reference="WCAG 2.1 – 1.3.1 Info and Relationships (Level A)",
        description="Element with role='option' is not contained within a required parent role='listbox'. This breaks the ARIA ownership contract.",
        variants=(
            Variant(element='<div role="option">Item A</div>', fix='<div role="listbox" aria-label="Options">\n  <div role="option" aria-selected="false">Item A</div>\n</div>', file_path="components/Dropdown.jsx", line=49),
        ),
    ),
    IssueTemplate(
        id="link-name", severity="critical", rule="link-name",
        standard_reference="WCAG 2.1 – 2.4.4 Link Purpose (Level A)",
        description="Link has no discernible text. Screen readers will announce it as an empty or unlabelled link.",
        variants=(
            Variant(element='<a href="/more"><svg>...</svg></a>', fix='<a href="/more" aria-label="Read more about our services"><svg aria-hidden="true">...</svg></a>', file_path="components/Card.jsx", line=88),
            Variant(element='<a href="/profile"><img src="/avatar.png"></a>', fix='<a href="/profile"><img src="/avatar.png" alt="View your profile"></a>', file_path="components/Header.jsx", line=61),
        ),
    ),
    IssueTemplate(
        id="html-lang", severity="info", rule="html-has-lang",
        standard_reference="WCAG 2.1 – 3.1.1 Language of Page (Level A)",
        description="The <html> element is missing a lang attribute. Screen readers use this to select the correct language voice engine.",
        variants=(
            Variant(element="<html>", fix='<html lang="en">', file_path="index.html", line=1),
        ),
    ),
    IssueTemplate(
        id="tabindex", severity="info", rule="tabindex",
        standard_reference="WCAG 2.1 – 2.1.1 Keyboard (Level A)",
        description="A tabindex value greater than 0 creates an unpredictable tab order that confuses keyboard navigation.",
        variants=(
            Variant(element='<div tabindex="5" class="promo-banner">', fix='<div tabindex="0" class="promo-banner">', file_path="components/Banner.jsx", line=7),
        ),
    ),
    IssueTemplate(
        id="select-name", severity="warning", rule="select-name",
        standard_reference="WCAG 2.1 – 1.3.1 Info and Relationships (Level A)",
        description="<select> has no accessible label. Assistive technology users cannot determine the purpose of this control.",
        variants=(
            Variant(element='<select name="country"><option>US</option>...</select>', fix='<label for="country">Country</label>\n<select id="country" name="country"><option>US</option>...</select>', file_path="components/AddressForm.jsx", line=44),
        ),
    ),
)
