"""
Default section templates for the known pages of the marketing site.

A template is used when no Content row exists for a page, by the "reset to
defaults" operation, by initialize_all(), and to describe the editable
structure of a page to the admin UI. Page names are lowercase because page
lookups are lowercased before they reach this table.
"""
from __future__ import annotations

import copy

_CTA_CONTACT = "/contact"

_VALUES = {
    "title": "What We Believe",
    "subtitle": "Our values shape how we work with clients and each other.",
    "items": [
        {"title": "Outcomes Over Output", "description": "We measure success by business results, not deliverables. Every engagement is designed to create lasting impact."},
        {"title": "Systems Thinking", "description": "Revenue problems are rarely isolated. We connect the dots across your organization to find root causes."},
        {"title": "Practical Expertise", "description": "Our recommendations are grounded in real-world experience. No theoretical frameworks that don't work in practice."},
        {"title": "Partnership Mindset", "description": "We're not consultants who disappear after the presentation. We roll up our sleeves and work alongside your team."},
    ],
}

_APPROACH = {
    "title": "How We Work",
    "subtitle": "A partnership approach that creates lasting transformation.",
    "steps": [
        {"number": "01", "title": "Listen First", "description": "We start every engagement by understanding your unique context. No cookie-cutter solutions."},
        {"number": "02", "title": "Diagnose Deeply", "description": "Surface-level fixes don't last. We identify root causes and systemic patterns."},
        {"number": "03", "title": "Design Pragmatically", "description": "Theory without practice is useless. We design solutions that work in your reality."},
        {"number": "04", "title": "Implement Together", "description": "Great strategies fail without execution. We stay until the job is done."},
    ],
}

_ABOUT = {
    "hero": {
        "title": "About Growth Valley",
        "description": "We help B2B companies transform fragmented revenue operations into unified, predictable growth engines.",
    },
    "mission": {
        "title": "Our Mission",
        "content": (
            "Growth Valley was founded on a simple observation: most B2B companies struggle with revenue "
            "unpredictability, not because they lack good products or talented people, but because their "
            "revenue operations are fragmented and misaligned.\n\nWe exist to change that. We build systems "
            "that enable predictable, scalable revenue growth, so leaders can focus on strategy instead of "
            "firefighting."
        ),
    },
    "origin": {
        "title": "The Origin",
        "content": (
            "After years of leading revenue operations for high-growth B2B companies, our founding team saw "
            "the same patterns repeat: great teams hampered by broken systems. They set out to build the firm "
            "they wished existed: a partner that could diagnose the real problems and build lasting solutions."
        ),
    },
    "values": _VALUES,
    "approach": _APPROACH,
    "cta": {
        "title": "Let's Build Something Together",
        "description": "Every transformation starts with a conversation. We'd love to hear about your revenue challenges.",
        "buttonText": "Schedule a Call",
        "buttonLink": _CTA_CONTACT,
    },
}

DEFAULT_CONTENT = {
    "home": {
        "hero": {
            "label": "Revenue Operations Consulting",
            "title": "Predictable Revenue Systems for Scalable Businesses",
            "subtitle": "We transform fragmented revenue operations into unified, predictable growth engines. No more guessing. No more missed targets.",
            "ctaText": "Schedule a Call",
            "ctaLink": _CTA_CONTACT,
            "secondaryCtaText": "View Case Studies",
            "secondaryCtaLink": "/case-studies",
        },
        "stats": [
            {"value": "40%+", "label": "Average Revenue Growth"},
            {"value": "85%", "label": "Forecast Accuracy Achieved"},
            {"value": "50+", "label": "Companies Transformed"},
            {"value": "$2B+", "label": "Revenue Influenced"},
        ],
        "problems": {
            "title": "The Challenge",
            "subtitle": "Most B2B companies struggle with revenue unpredictability",
            "description": "Sound familiar? You're not alone. These challenges are more common than you think.",
            "items": [
                {"title": "Unpredictable Revenue", "description": "Forecasting feels like guesswork. Missed targets erode confidence and derail growth plans."},
                {"title": "Fragmented Operations", "description": "Sales, marketing, and customer success operate in silos. Data lives in different systems. Handoffs break down."},
                {"title": "Scaling Bottlenecks", "description": "Founder-led sales becomes unsustainable. Growth stalls when individuals, not systems, drive revenue."},
                {"title": "Wasted Resources", "description": "High customer acquisition costs. Low retention. Revenue leaks across the funnel without visibility."},
            ],
        },
        "solutions": {
            "title": "Our Approach",
            "subtitle": "Building predictable revenue, systematically",
            "description": "We don't offer quick fixes. We build lasting revenue systems.",
            "items": [
                {"icon": "chart", "title": "Revenue Architecture", "description": "Design unified revenue systems with clear stages, metrics, and accountability."},
                {"icon": "process", "title": "Sales Process Design", "description": "Build scalable processes that convert leads consistently and efficiently."},
                {"icon": "team", "title": "RevOps Implementation", "description": "Unify operations across sales, marketing, and customer success."},
                {"icon": "target", "title": "Go-to-Market Strategy", "description": "Define the optimal route to market for your products and segments."},
            ],
        },
        "industries": {
            "title": "Industries",
            "subtitle": "Deep expertise across B2B sectors",
            "description": "We've helped companies in every major B2B industry transform their revenue operations.",
            "items": [
                {"icon": "💻", "name": "SaaS & Technology", "description": "Accelerating growth for software companies worldwide."},
                {"icon": "👔", "name": "Professional Services", "description": "Building scalable revenue for consulting and services firms."},
                {"icon": "🏭", "name": "Manufacturing", "description": "Modernizing go-to-market for industrial leaders."},
                {"icon": "🏦", "name": "Financial Services", "description": "Driving revenue excellence in regulated environments."},
            ],
        },
        "caseStudyPreview": {
            "title": "Results",
            "subtitle": "Real transformations. Real numbers.",
            "items": [
                {"client": "TechScale", "industry": "SaaS", "result": "40% revenue growth", "description": "Transformed revenue operations for a fast-growing SaaS company.", "link": "/case-studies/saas-revenue-transformation"},
                {"client": "GlobalTech", "industry": "Manufacturing", "result": "60% new market revenue", "description": "Redesigned go-to-market strategy for a legacy manufacturer.", "link": "/case-studies/manufacturing-demand-generation"},
            ],
        },
        "process": {
            "title": "How We Work",
            "subtitle": "A systematic approach to transformation",
            "steps": [
                {"number": "01", "title": "Discovery", "description": "Deep dive into your current state. Identify gaps, opportunities, and constraints."},
                {"number": "02", "title": "Design", "description": "Architect the target state. Define processes, systems, and organizational structure."},
                {"number": "03", "title": "Implement", "description": "Execute with precision. Build, train, and optimize in rapid iterations."},
                {"number": "04", "title": "Optimize", "description": "Continuous improvement. Monitor, measure, and refine for sustainable performance."},
            ],
        },
        "cta": {
            "title": "Ready for predictable revenue?",
            "description": "Let's discuss how Growth Valley can transform your revenue operations. No commitment required.",
            "buttonText": "Schedule a Call",
            "buttonLink": _CTA_CONTACT,
        },
    },
    "about": _ABOUT,
    "company": _ABOUT,
    "services": {
        "hero": {
            "title": "Revenue Solutions That Scale",
            "description": "We offer four core solutions, each designed to address specific revenue challenges. Deploy individually or together for maximum impact.",
        },
        "solutions": [
            {
                "id": "revenue-architecture",
                "title": "Revenue Architecture",
                "description": "Design and implement unified revenue systems that align your entire organization around predictable growth.",
                "features": ["Revenue stage definition and mapping", "Metrics and KPI framework", "Process ownership and RACI design", "Revenue team structure", "Compensation alignment"],
                "outcomes": ["Clear visibility into revenue", "Aligned teams", "Simplified forecasting"],
            },
            {
                "id": "sales-process",
                "title": "Sales Process Design",
                "description": "Build scalable sales processes that convert leads consistently and efficiently throughout the customer journey.",
                "features": ["Qualification framework implementation", "Stage definition and exit criteria", "Playbook development", "Deal velocity optimization", "Win rate improvement programs"],
                "outcomes": ["Faster sales cycles", "Higher win rates", "Consistent execution"],
            },
            {
                "id": "revops",
                "title": "RevOps Implementation",
                "description": "Unify operations across sales, marketing, and customer success for seamless revenue flow.",
                "features": ["Operations team design", "Tech stack integration", "Data infrastructure build", "Reporting and dashboard creation", "RevOps process governance"],
                "outcomes": ["Unified revenue view", "Efficient operations", "Data-driven decisions"],
            },
            {
                "id": "gtm",
                "title": "Go-to-Market Strategy",
                "description": "Define the optimal route to market for your products, segments, and competitive landscape.",
                "features": ["Market segmentation analysis", "Competitive positioning", "Channel strategy development", "Pricing and packaging", "Launch planning"],
                "outcomes": ["Clear market focus", "Effective channels", "Competitive advantage"],
            },
        ],
        "cta": {
            "title": "Not sure which solution you need?",
            "description": "Our discovery process identifies the highest-impact opportunities for your specific situation.",
            "buttonText": "Schedule a Discovery Call",
            "buttonLink": _CTA_CONTACT,
        },
    },
    "industries": {
        "hero": {
            "title": "Industry Expertise",
            "description": "We understand the unique challenges of each sector. Our playbook adapts to your industry while drawing on proven patterns from across B2B.",
        },
        "industries": [
            {
                "id": "saas",
                "name": "SaaS & Technology",
                "icon": "💻",
                "description": "We've helped dozens of SaaS companies transform their revenue operations, from early-stage startups to established enterprises.",
                "challenges": ["Scaling revenue beyond founder-led sales", "Aligning PLG and sales-led motions", "Improving net revenue retention", "Managing multiple pricing tiers"],
                "results": ["40%+ average revenue growth", "85%+ forecast accuracy", "125% average NRR", "25% faster sales cycles"],
                "caseStudyCount": 15,
            },
            {
                "id": "professional-services",
                "name": "Professional Services",
                "icon": "👔",
                "description": "Consulting firms, agencies, and service providers face unique revenue challenges. We help build systems that scale expertise.",
                "challenges": ["Founder dependency in sales", "Project-based revenue unpredictability", "Balancing utilization and growth", "Transitioning to recurring revenue"],
                "results": ["3x revenue scale in 24 months", "Founder time freed by 70%", "Predictable pipeline visibility", "Scalable revenue engine"],
                "caseStudyCount": 12,
            },
            {
                "id": "manufacturing",
                "name": "Manufacturing",
                "icon": "🏭",
                "description": "Traditional manufacturers are digitally transforming their go-to-market. We help navigate this transition without disrupting core business.",
                "challenges": ["Digital-first competitors", "Long, complex sales cycles", "Evolved buyer expectations", "Modernizing legacy processes"],
                "results": ["60% new market revenue", "35% higher win rates", "Digital channel development", "Cross-functional alignment"],
                "caseStudyCount": 10,
            },
            {
                "id": "financial-services",
                "name": "Financial Services",
                "icon": "🏦",
                "description": "Regulated industries require specialized approaches. We bring experience navigating compliance while driving revenue excellence.",
                "challenges": ["Complex compliance requirements", "Extended sales cycles", "Cross-selling across products", "Balancing risk and growth"],
                "results": ["45% faster deal velocity", "90%+ compliance adherence", "Unified revenue visibility", "Streamlined operations"],
                "caseStudyCount": 8,
            },
        ],
        "cta": {
            "title": "Don't see your industry?",
            "description": "Our methodology applies across B2B sectors. If you sell to businesses, we can help transform your revenue operations.",
            "buttonText": "Tell Us About Your Industry",
            "buttonLink": _CTA_CONTACT,
        },
    },
    "casestudies": {
        "hero": {
            "title": "Case Studies",
            "description": "Real transformations. Real results. Explore how we've helped B2B companies achieve predictable revenue growth.",
        },
        "featured": {
            "title": "Featured Results",
            "stats": [
                {"value": "40%", "label": "Average Revenue Growth"},
                {"value": "85%", "label": "Forecast Accuracy"},
                {"value": "50+", "label": "Companies Transformed"},
                {"value": "$2B+", "label": "Revenue Influenced"},
            ],
        },
        "filter": {
            "industries": ["All", "SaaS", "Manufacturing", "Professional Services", "Financial Services"],
            "solutions": ["All", "Revenue Architecture", "Sales Process", "RevOps", "Go-to-Market"],
        },
        "cta": {
            "title": "Ready to write your success story?",
            "description": "Let's discuss how we can help you achieve similar results.",
            "buttonText": "Schedule a Consultation",
            "buttonLink": _CTA_CONTACT,
        },
    },
    "contact": {
        "hero": {
            "title": "Get in Touch",
            "description": "Ready to transform your revenue operations? Let's start the conversation.",
        },
        "form": {
            "interests": [
                {"value": "revenue-architecture", "label": "Revenue Architecture"},
                {"value": "sales-process", "label": "Sales Process Design"},
                {"value": "revops", "label": "RevOps Implementation"},
                {"value": "gtm", "label": "Go-to-Market Strategy"},
                {"value": "other", "label": "Other / Not Sure"},
            ],
        },
        "info": {
            "title": "Direct Contact",
            "email": "hello@growthvalley.com",
            "location": "Nashik, Maharashtra, India",
        },
        "expectations": {
            "title": "What to Expect",
            "items": [
                "Response within one business day",
                "Initial discovery call to understand your situation",
                "Clear proposal with scope, timeline, and investment",
                "No commitment required for initial conversation",
            ],
        },
        "successMessage": {
            "title": "Message Received",
            "description": "Thank you for reaching out. We'll get back to you within one business day.",
        },
    },
    "privacy": {
        "hero": {"title": "Privacy Policy", "lastUpdated": "2026-02-18"},
        "content": {
            "intro": "At Growth Valley, we take your privacy seriously. This policy describes what information we collect, how we use it, and your rights regarding your personal data.",
            "sections": [
                {"title": "1. Information We Collect", "content": "We collect information you provide directly to us, such as when you fill out a contact form or communicate with us. We also automatically collect certain information when you visit our website, including your IP address, browser type and pages visited."},
                {"title": "2. How We Use Your Information", "content": "We use the information we collect to respond to your inquiries, provide the services you request, improve our website and comply with legal obligations. We do not sell your personal information to third parties."},
                {"title": "3. Cookies and Tracking", "content": "We use cookies and similar tracking technologies to understand how visitors interact with our website. You can control cookies through your browser settings."},
                {"title": "4. Your Rights", "content": "Depending on your location, you may have rights to access, correct, delete or port your data. Contact us at hello@growthvalley.com to exercise these rights."},
            ],
        },
        "cta": {
            "title": "Questions About Your Privacy?",
            "description": "If you have any questions or concerns about your privacy, please don't hesitate to contact us.",
            "buttonText": "Contact Us",
            "buttonLink": _CTA_CONTACT,
        },
    },
    "terms": {
        "hero": {"title": "Terms & Conditions", "lastUpdated": "2026-02-18"},
        "content": {
            "intro": "Welcome to Growth Valley. By accessing or using our website and services, you agree to be bound by these Terms & Conditions. Please read them carefully.",
            "sections": [
                {"title": "1. Acceptance of Terms", "content": "By accessing and using this website, you accept and agree to be bound by these Terms & Conditions and our Privacy Policy."},
                {"title": "2. Services", "content": "Growth Valley provides revenue operations consulting services to B2B companies. The specific scope of services is defined in individual service agreements."},
                {"title": "3. Limitation of Liability", "content": "To the maximum extent permitted by law, Growth Valley shall not be liable for any indirect, incidental or consequential damages arising from your use of our website or services."},
                {"title": "4. Governing Law", "content": "These Terms & Conditions are governed by the laws of India. Disputes are subject to the exclusive jurisdiction of the courts in Nashik, Maharashtra, India."},
            ],
        },
        "cta": {
            "title": "Questions About Our Terms?",
            "description": "If you have any questions about these terms or our services, please get in touch.",
            "buttonText": "Contact Us",
            "buttonLink": _CTA_CONTACT,
        },
    },
}


def get_default_structure(page: str) -> dict:
    """Deep copy of the template for `page`, or {} for unknown pages."""
    return copy.deepcopy(DEFAULT_CONTENT.get((page or "").lower(), {}))


def default_page_names() -> list:
    return sorted(DEFAULT_CONTENT)
