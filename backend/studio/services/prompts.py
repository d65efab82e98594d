"""Prompt assembly for persona-driven content generation."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from studio.services.personas import DEFAULT_PERSONA, Persona, persona_prompt


class Tone(str, Enum):
    """Writing style."""

    FORMAL = "formal"
    CASUAL = "casual"
    PERSUASIVE = "persuasive"
    EDUCATIONAL = "educational"
    INSPIRATIONAL = "inspirational"


class PostLength(str, Enum):
    """Target length for social posts."""

    CONCISE = "concise"
    MEDIUM = "medium"
    DETAILED = "detailed"


class DifficultyLevel(str, Enum):
    """Audience expertise for long-form content."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class GenerationType(str, Enum):
    """Kinds of text content the studio can produce."""

    POST = "post"
    DOCUMENT = "document"
    CONTENT_IDEAS = "contentIdeas"
    TOP_10_IDEAS = "top10ideas"
    PROFESSIONAL_IDEAS = "professionalIdeas"
    MYTH_BUSTING = "mythBusting"
    QUICK_WINS = "quickWins"
    COMPARATIVE_ANALYSIS = "comparativeAnalysis"
    TUTORIAL_OUTLINE = "tutorialOutline"
    EXAMPLE_POST = "examplePost"
    INTERVIEW_QUESTIONS = "interviewQuestions"
    CV_ENHANCEMENT = "cvEnhancement"
    RESUME_TAILORING = "resumeTailoring"
    COMPANY_PROSPECTOR = "companyProspector"
    DAY_WISE_CONTENT_PLAN = "dayWiseContentPlan"
    WEEKLY_CONTENT_PLAN = "weeklyContentPlan"


TONE_PROMPTS: dict[Tone, str] = {
    Tone.FORMAL: (
        "Adopt a formal writing style. Your language should be professional, objective, and "
        "precise. Use well-structured sentences and avoid colloquialisms, slang, or overly "
        "casual phrasing."
    ),
    Tone.CASUAL: (
        "Adopt a casual, conversational writing style. Use a friendly and approachable voice. "
        "Feel free to use contractions, simpler language, and a more personal, direct tone."
    ),
    Tone.PERSUASIVE: (
        "Adopt a persuasive and compelling writing style. Your goal is to convince the reader. "
        "Use strong, active verbs, rhetorical questions, and a confident tone. Appeal to logic "
        "and emotion where appropriate."
    ),
    Tone.EDUCATIONAL: (
        "Adopt an educational and informative writing style. Your primary goal is to teach the "
        "reader. Break down complex topics into clear, easy-to-understand parts. Use analogies, "
        "simple explanations, and a structured, logical flow."
    ),
    Tone.INSPIRATIONAL: (
        "Adopt an inspirational and motivational writing style. Your aim is to uplift and "
        "encourage the reader. Use positive language, storytelling, and a visionary tone. Focus "
        "on possibilities, growth, and empowerment."
    ),
}

LENGTH_PROMPTS: dict[PostLength, str] = {
    PostLength.CONCISE: "The post should be concise, around 100-150 words.",
    PostLength.MEDIUM: "The post should be of medium length, around 200-250 words.",
    PostLength.DETAILED: (
        "The post should be detailed and in-depth, around 300-400 words, "
        "possibly using a list format."
    ),
}


@dataclass
class GenerationOptions:
    """Everything needed to build a generation prompt."""

    type: GenerationType
    topic: str
    persona: Persona = DEFAULT_PERSONA
    tone: Tone = Tone.FORMAL
    post_length: PostLength = PostLength.MEDIUM
    difficulty_level: DifficultyLevel = DifficultyLevel.INTERMEDIATE
    page_count: int = 1
    company: str | None = None
    day_number: int | None = None


@dataclass
class CompanySuggestion:
    """A company worth applying to, with its broad industry."""

    name: str
    industry: str


@dataclass
class BuiltPrompt:
    """Prompt text plus how it should be sent."""

    text: str
    context: str
    grounded: bool = True


def tone_prompt(tone: Tone) -> str:
    return TONE_PROMPTS.get(tone, "Adopt a professional and engaging writing style.")


def length_prompt(length: PostLength) -> str:
    return LENGTH_PROMPTS[length]


def _voice(options: GenerationOptions) -> str:
    return f"{persona_prompt(options.persona)}\n{tone_prompt(options.tone)}"


def _post_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}

Generate a LinkedIn post about the following topic: '{options.topic}'.

{length_prompt(options.post_length)}

Use Google Search to find recent, factual information to make the post credible and up-to-date.

The post should be well-structured, use emojis appropriately to enhance readability, and must include at least 5 relevant hashtags like #AI, #DataScience, #HealthcareAI, #MachineLearning, #DigitalHealth. If the persona is Ganapathi Kakarla, also include #GanapathiKakarla."""


def _document_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}

Generate a comprehensive document of approximately {options.page_count} page(s) on the topic: '{options.topic}'. A standard page has about 500 words.

The document must be well-structured with a clear hierarchy using Markdown for formatting. It must include:
1. A main title (using #).
2. An introduction section.
3. Several detailed chapters covering different aspects of the topic (using ## for chapter titles).
4. Sub-sections within chapters where appropriate (using ###).
5. Use lists, bold text, and italics to improve readability.
6. A concluding summary section.

Crucially, adjust the content's complexity, technical depth, and vocabulary to be appropriate for a {options.difficulty_level.value} audience.
- For 'beginner', explain concepts simply and avoid jargon.
- For 'intermediate', assume some foundational knowledge.
- For 'advanced', use technical terminology and delve into complex details.

Use Google Search to gather factual, up-to-date information to ensure the document is accurate and reliable.

Ensure the content is detailed, accurate, and reflects deep expertise in the specified persona's field."""


def _weekly_plan_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}
You are an expert LinkedIn Content Strategist. Your task is to create a complete, ready-to-execute 7-day content plan based on the overarching theme: '{options.topic}'.

The goal is to build authority and engagement by exploring this topic from multiple angles throughout the week. Use Google Search to ensure the ideas and information are current and relevant.

Generate a detailed plan for Day 1 through Day 7. For each day, you must provide the following in well-formatted Markdown:

1. **Day & Theme 🗓️**: (e.g., "Monday: Foundational Concept", "Tuesday: Technical Deep-Dive").
2. **Post Headline ✍️**: A compelling, attention-grabbing headline for the post.
3. **Key Talking Points 🎯**: 2-3 bullet points outlining the core message of the post. This should be a mini-brief for the content.
4. **Suggested Format 🖼️**: The best format for the post (e.g., Text-only, Poll, Image + Text, Carousel, Quick Video Script).
5. **Hashtags #️⃣**: A list of 5-7 relevant hashtags.

Structure the output clearly for each day."""


def _content_ideas_prompt(options: GenerationOptions) -> str:
    return f"""{persona_prompt(options.persona)} Your tone is professional, insightful, and strategic.

Generate a list of 5-7 high-impact, creative, and diverse LinkedIn content ideas based on the topic: '{options.topic}'.

For each idea, provide:
1. A catchy title/headline.
2. A brief description of the content.
3. The recommended format (e.g., Mini explainer, Infographic, Code snippet, Slide deck, Poster-style image, Carousel, etc.).

Structure the output in well-formatted Markdown. Use emojis to make it engaging.

Here are some categories and examples of great content to inspire you:

---
**INSPIRATION & EXAMPLES**

🧠 **Knowledge & Thought Leadership**
- Mini explainers: AI concepts applied to healthcare (e.g., "How CNNs detect diabetic retinopathy")
- Infographics: Visual breakdowns of healthcare datasets (e.g., NFHS, WHO, NHM)
- Opinion posts: Your take on ethical AI in diagnostics, data privacy, or bias in algorithms
- Flashcards: Bilingual technical terms (Telugu-English) for healthcare AI

📊 **Projects & Case Studies**
- Before/after dashboards: Tableau or Python visualizations of patient data, risk scores, etc.
- Code snippets: Modular Python functions for BMI, health risk prediction, or OOP banking logic
- Slide decks: Interactive PowerPoint presentations on AI in cardiac care, hospital workflows, etc.
- GitHub links: Share repositories with clean documentation and healthcare-focused scripts

📸 **Visual & Creative Posts**
- Mood boards: Color palettes and design inspiration for healthcare presentations
- Poster-style images: "AI x Healthcare" trends, neural network diagrams, or anatomy overlays
- Behind-the-scenes: Your workspace setup, study routine, or presentation prep
- Flashcard carousels: Swipeable bilingual terms or visual guides

📚 **Learning & Resources**
- Book summaries: Key takeaways from AI, healthcare economics, or policy books
- Course reviews: Your experience with specific modules, certifications, or workshops
- Cheat sheets: Python, ML, or healthcare metrics in one-page formats
- Quiz challenges: Invite followers to solve healthcare data science questions

🧬 **Healthcare Insights**
- Comparative posts: India vs global healthcare infrastructure, policy, or delivery models
- Data stories: NFHS insights turned into compelling narratives
- Patient-centric AI: How tech can improve outcomes, reduce costs, or empower clinicians
- Policy breakdowns: Simplified summaries of Ayushman Bharat, ABDM, HIPAA, etc.

💼 **Career & Personal Branding**
- Milestone updates: Certifications, internships, presentations, or awards
- Reflection posts: What you learned from a project, failure, or mentor
- Networking shoutouts: Tag peers, professors, or collaborators
- Vision statements: Your mission in healthcare AI and how you plan to impact lives
---"""


def _top_10_ideas_prompt(options: GenerationOptions) -> str:
    return f"""{persona_prompt(options.persona)}, advising a student or junior colleague on content strategy.

Generate a list of exactly 10 high-impact, actionable LinkedIn post ideas tailored to the specific topic: '{options.topic}'.

The ideas should be diverse and cover different content formats. Structure the output as a numbered list in well-formatted Markdown. Use emojis to make it engaging.

Each idea must be a concrete, specific post suggestion that a student could create based on the topic.

Use the following categories and examples as a framework and inspiration for the types of ideas to generate. Ensure the generated ideas are specific to '{options.topic}'.

---
**FRAMEWORK & INSPIRATION**

1. **📊 Project Highlight:** A post about a specific project. (e.g., Health risk prediction model, Tableau dashboard).
2. **🧠 AI Concept Explainer:** A post breaking down a technical concept. (e.g., Explainers of CNNs, ethical AI, NLP).
3. **📸 Visual Content:** An idea for a visual post. (e.g., Infographics, flashcards, slide decks).
4. **📚 Learning Resource:** A post sharing knowledge or resources. (e.g., Cheat sheets, book summaries, course reviews).
5. **💡 Thought Leadership:** A post sharing a unique opinion or perspective. (e.g., Take on a policy like ABDM, India vs global health tech).
6. **💼 Career Milestone:** A post about professional development. (e.g., Internship experience, certifications, presentation).
7. **🧬 Data Story:** A post that turns data into a narrative. (e.g., NFHS insights, patient-centric use cases).
8. **🧰 Code Snippet:** A post sharing a piece of code. (e.g., BMI calculator, health scoring function).
9. **🎯 Interactive Post:** An idea for an engaging post. (e.g., Quiz, poll, carousel guide).
10. **🌟 Personal Branding:** A post that builds a personal brand. (e.g., "Day in the life", study hacks, networking shoutout).
---"""


def _professional_ideas_prompt(options: GenerationOptions) -> str:
    return f"""{persona_prompt(options.persona)}. Your goal is to brainstorm a list of professional, high-impact LinkedIn content ideas for another professional in the field.

The ideas must be tailored to the specific topic: '{options.topic}'.

Generate a list of 5-8 content ideas based on the following professional categories. For each idea, provide a compelling headline and a brief description of the content.

Structure the output as a list in well-formatted Markdown, using emojis to enhance readability.

---
**INSPIRATION FRAMEWORK**

📌 **1. Domain-Specific Case Studies:** Focus on real-world applications and problem-solving.
*   Examples: "How AI can reduce diagnostic delays in [specific area like cardiac care]", "Predictive modeling for [specific metric like hospital readmission rates]".

📌 **2. Industry Trend Analysis:** Provide insights into the future of the field.
*   Examples: "Top AI trends transforming [specific sector like Indian healthcare]", "Comparing [policy like ABDM] with global frameworks".

📌 **3. Policy & Ethics Commentary:** Offer a thoughtful perspective on important regulations and ethical questions.
*   Examples: "What [policy like Ayushman Bharat Digital Mission] means for AI startups", "Bias in healthcare algorithms: A case for inclusive datasets".

📌 **4. Professional Templates & Tools:** Share practical, reusable resources.
*   Examples: "My Python template for [task like health risk scoring]", "A PowerPoint layout for presenting AI models to clinicians".

📌 **5. Collaboration & Networking Posts:** Create opportunities for engagement and partnership.
*   Examples: "Looking to collaborate on [project like a bilingual AI glossary]", "Seeking mentors in [field like health tech product design]".

📌 **6. Internship & Project Reflections:** Share personal learnings and experiences.
*   Examples: "What I learned from building a [specific model like cardiac triage model]", "My experience working with [dataset like hospital EHR data]".

📌 **7. Professional Development Updates:** Showcase continuous learning and achievements.
*   Examples: "Completed a certification in [specific area like Healthcare Analytics]", "Key takeaways from a webinar on [topic like AI in medical imaging]".

📌 **8. Infographics & Visual Explainers:** Simplify complex topics visually.
*   Examples: "How [algorithm like CNNs] detect anomalies in X-rays", "Visual guide to [architecture like ABDM]".
---"""


def _myth_busting_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}
Your goal is to create content that debunks common misconceptions and clarifies complex topics for a professional audience.

For the topic '{options.topic}', identify 3-5 common myths and generate "Myth vs. Reality" post ideas. Use Google Search to find factual information to support the "Reality" section and ensure it is accurate.

For each idea, provide:
1. **The Myth 🧐**: A clear, one-sentence statement of the misconception.
2. **The Reality ✅**: A concise, factual explanation that corrects the myth, based on search results.
3. **Post Angle 📝**: A suggestion for how to frame the LinkedIn post to be engaging (e.g., "Start with a question," "Use a simple visual comparison," "Share a personal anecdote").

Structure the output in well-formatted Markdown."""


def _quick_wins_prompt(options: GenerationOptions) -> str:
    return f"""{persona_prompt(options.persona)}. Your goal is to brainstorm quick, high-engagement LinkedIn posts that can be created in minutes.

For the topic '{options.topic}', generate a list of 5-7 "Quick Win" content ideas. These should be designed to maximize interaction (likes, comments, shares) with minimal effort.

Include a mix of the following formats:
- **Polls 📊**: A multiple-choice question to spark debate. Provide the question and 2-4 options.
- **Provocative Questions ❓**: An open-ended question to encourage detailed comments.
- **Quick Tips 💡**: A single, actionable piece of advice or a useful fact.
- **"Fill in the Blank" ⚫**: A sentence for the audience to complete with their own thoughts.
- **One-Liner Insight 💬**: A single, powerful sentence that summarizes a key idea about the topic.

Structure the output as a list in well-formatted Markdown."""


def _comparative_analysis_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}
Your goal is to create content that provides deep, comparative insights for a professional audience.

For the topic '{options.topic}', generate 3-5 ideas for a "Compare & Contrast" LinkedIn post. Use Google Search to find up-to-date, factual points for the comparison.

For each idea, provide:
1. **Comparison Title ⚔️**: A catchy title for the post (e.g., "Python vs. R for Health Data Science: The Ultimate Showdown").
2. **Entities to Compare 🆚**: Clearly state the two technologies, frameworks, policies, or concepts being compared.
3. **Key Comparison Points 🎯**: List 3-4 critical points of comparison (e.g., Performance, Ease of Use, Community Support, Use Cases in Healthcare), supported by facts from search.
4. **Expert Takeaway 💡**: A concluding sentence that summarizes your recommendation or key insight.

Structure the output in well-formatted Markdown."""


def _tutorial_outline_prompt(options: GenerationOptions) -> str:
    level = options.difficulty_level.value
    return f"""{_voice(options)}
Your goal is to create a practical, step-by-step tutorial outline to help others build skills.

For the topic '{options.topic}', generate a detailed tutorial outline for a LinkedIn carousel or a short blog post.

The tutorial should be suitable for a {level} audience.
- For 'beginner', assume no prior knowledge and keep steps simple.
- For 'intermediate', assume basic familiarity with core concepts.
- For 'advanced', target experienced practitioners with complex steps and prerequisites.

The outline must include:
1. **Tutorial Title 🛠️**: A clear and compelling title.
2. **Target Audience 👨‍💻**: Who is this tutorial for? (e.g., "Aspiring Data Scientists," "Healthcare Analysts"). This should align with the {level} level.
3. **Prerequisites ✅**: What skills or tools are needed before starting? (e.g., "Basic Python knowledge," "Familiarity with Pandas").
4. **Step-by-Step Outline 📝**: A numbered list of 5-7 clear, actionable steps. Each step should have a brief description.
5. **Learning Outcomes 🏆**: What will the reader be able to do after completing the tutorial?

Structure the output in well-formatted Markdown."""


def _example_post_prompt(options: GenerationOptions) -> str:
    return f"""{_voice(options)}
Your task is to craft an exemplary, high-quality LinkedIn post on the topic: '{options.topic}'.
This post will serve as a gold-standard example for others to follow.

The post must exhibit the following qualities:
1. **Strong Hook:** An engaging opening sentence that grabs the reader's attention.
2. **Clear Structure:** Well-organized content, possibly using bullet points or a numbered list to break down complex information.
3. **Value-Driven Content:** Provide genuine insights, data points, or a unique perspective.
4. **Professional Tone:** Maintain the specified persona's voice throughout.
5. **Call to Action (CTA):** End with a question or a prompt to encourage discussion and engagement.
6. **Strategic Hashtags:** Include at least 5 highly relevant hashtags.

Use Google Search to ensure the information is current and factual. The post should be approximately 200-300 words."""


def _day_wise_plan_prompt(options: GenerationOptions) -> str:
    if not options.day_number:
        raise ValueError("A day number is required for the Day-Wise Content Plan.")

    day = options.day_number
    return f"""{_voice(options)}

You are executing a 10-day LinkedIn content plan centered around the theme: '{options.topic}'.
Here is the strategic framework for the 10-day plan:

- **Day 1: Foundational Concept 🧠**: Break down a core concept of the main topic simply and clearly.
- **Day 2: Project Spotlight 📊**: Detail a relevant project or a case study related to the topic.
- **Day 3: Technical Deep Dive 💻**: Share a practical code snippet, a configuration, or a specific technical tip.
- **Day 4: Industry Analysis 📈**: Discuss a recent trend, a new research paper, or an important news item.
- **Day 5: Myth Busting 🧐**: Address and debunk a common misconception or myth surrounding the topic.
- **Day 6: Tool/Resource Share 📚**: Recommend and briefly review a valuable tool, library, book, or course.
- **Day 7: Interactive Post 💬**: Ask an engaging open-ended question or create a poll to spark community discussion.
- **Day 8: Career Journey 🚀**: Share a personal story, a key lesson learned, or actionable career advice related to the topic.
- **Day 9: Behind the Scenes 📸**: Offer a glimpse into your work process, your setup, or a "day in the life" perspective.
- **Day 10: Future Forward 🔮**: Make a bold prediction or share your long-term vision for the future of the topic.

Your task is to generate a complete, high-quality, ready-to-publish LinkedIn post ONLY for Day {day} of this plan.

The post for Day {day} must:
1. Strictly adhere to the specific theme for that day as described in the framework.
2. Be well-structured, engaging, and approximately 200-300 words long.
3. Directly relate to the overarching theme of '{options.topic}'.
4. Use appropriate emojis to enhance readability.
5. Include at least 5 relevant hashtags.
6. End with a compelling question or a call to action to encourage engagement."""


def _interview_questions_prompt(options: GenerationOptions) -> str:
    company_context = (
        f" The questions should be tailored for a position at a company like {options.company}."
        if options.company
        else ""
    )
    return f"""{persona_prompt(options.persona)}. Your role is a hiring manager preparing for an interview.

Generate a list of 10-15 insightful and challenging interview questions for a candidate applying for a role related to '{options.topic}'.{company_context}

The questions should cover a range of topics, including:
- Technical proficiency and core concepts.
- Problem-solving and analytical skills.
- Behavioral questions to assess cultural fit and soft skills.
- Project experience and practical application of skills.
- Industry awareness and future trends.

Structure the output in well-formatted Markdown, categorized by question type (e.g., Technical, Behavioral)."""


def _cv_enhancement_prompt(options: GenerationOptions) -> str:
    company_context = (
        f" The suggestions should be tailored to appeal to a company like {options.company}."
        if options.company
        else ""
    )
    return f"""{_voice(options)}
You are a professional career coach reviewing a client's CV.

The client is targeting a role related to '{options.topic}'.{company_context}

Provide a list of 5-7 specific, actionable suggestions to enhance their CV. For each suggestion, explain *why* it's important. The advice should be modern and impactful.

Focus on:
- **Keywords and Phrasing:** Suggest specific terms to include that will pass through Applicant Tracking Systems (ATS).
- **Quantifiable Achievements:** Give examples of how to turn responsibilities into measurable results (e.g., "Increased efficiency by X%" instead of "Responsible for task Y").
- **Project Highlights:** Recommend how to best showcase relevant projects.
- **Skills Section:** Advise on which technical and soft skills to emphasize for this role.

Structure the output as a list in well-formatted Markdown."""


def _resume_tailoring_prompt(options: GenerationOptions) -> str:
    if not options.company:
        raise ValueError("A company name is required for Resume Tailoring.")

    company = options.company
    return f"""{_voice(options)}
Your task is to act as a career advisor, providing hyper-specific advice for tailoring a resume.

The target role is '{options.topic}'.
The target company is '{company}'.

Use Google Search to learn about {company}'s values, recent projects, and the technologies they use.

Generate a list of 5-7 concrete, actionable steps to tailor a resume specifically for this role at this company.

For each step, provide:
1. **The Action:** A clear instruction (e.g., "Mirror Keywords from the Job Description," "Highlight a Project with X Technology").
2. **The Rationale:** Explain *why* this action is critical for this specific company, referencing their culture or tech stack found via search.
3. **An Example:** Provide a short "Before" and "After" snippet to illustrate the change.

Structure the output in well-formatted Markdown."""


def _company_prospector_prompt(options: GenerationOptions) -> str:
    return f"""{persona_prompt(options.persona)}. Your role is a strategic career advisor.

Based on the skills and interests related to '{options.topic}', identify and profile 5-7 promising companies that would be excellent prospects for a job applicant.

Use Google Search to find relevant companies and information.

For each company, provide a profile in Markdown that includes:
- **Company Name:**
- **Industry/Niche:**
- **Why They're a Good Fit:** A brief explanation connecting the company's work to the '{options.topic}' skills.
- **Recent News or Projects:** A relevant, recent piece of information (e.g., a new product launch, a research paper, a major partnership) that an applicant could mention in a cover letter or interview.

Ensure the list is diverse, including established leaders and innovative startups if possible."""


PromptBuilder = Callable[[GenerationOptions], str]

# type -> (builder, context used in error messages, use search grounding)
_BUILDERS: dict[GenerationType, tuple[PromptBuilder, str, bool]] = {
    GenerationType.POST: (_post_prompt, "generate LinkedIn post", True),
    GenerationType.DOCUMENT: (_document_prompt, "generate document", True),
    GenerationType.WEEKLY_CONTENT_PLAN: (
        _weekly_plan_prompt,
        "generate weekly content plan",
        True,
    ),
    GenerationType.CONTENT_IDEAS: (_content_ideas_prompt, "generate content ideas", False),
    GenerationType.TOP_10_IDEAS: (_top_10_ideas_prompt, "generate top 10 ideas", False),
    GenerationType.PROFESSIONAL_IDEAS: (
        _professional_ideas_prompt,
        "generate professional ideas",
        False,
    ),
    GenerationType.MYTH_BUSTING: (_myth_busting_prompt, "generate myth-busting content", True),
    GenerationType.QUICK_WINS: (_quick_wins_prompt, "generate quick wins content", False),
    GenerationType.COMPARATIVE_ANALYSIS: (
        _comparative_analysis_prompt,
        "generate comparative analysis content",
        True,
    ),
    GenerationType.TUTORIAL_OUTLINE: (
        _tutorial_outline_prompt,
        "generate tutorial outline content",
        False,
    ),
    GenerationType.EXAMPLE_POST: (_example_post_prompt, "generate example post", True),
    GenerationType.DAY_WISE_CONTENT_PLAN: (
        _day_wise_plan_prompt,
        "generate day-wise content",
        False,
    ),
    GenerationType.INTERVIEW_QUESTIONS: (
        _interview_questions_prompt,
        "generate interview questions",
        True,
    ),
    GenerationType.CV_ENHANCEMENT: (
        _cv_enhancement_prompt,
        "generate CV enhancement suggestions",
        True,
    ),
    GenerationType.RESUME_TAILORING: (
        _resume_tailoring_prompt,
        "generate resume tailoring advice",
        True,
    ),
    GenerationType.COMPANY_PROSPECTOR: (_company_prospector_prompt, "prospect companies", True),
}


def build_prompt(options: GenerationOptions) -> BuiltPrompt:
    """
    Build the generation prompt for the requested content type.

    Raises:
        ValueError: If the generation type is not supported, or a field the
            type needs (day number, company) is missing.
    """
    try:
        builder, context, grounded = _BUILDERS[options.type]
    except KeyError:
        raise ValueError(f"Unsupported generation type: {options.type}") from None

    return BuiltPrompt(text=builder(options), context=context, grounded=grounded)


def build_humanify_prompt(text: str, persona: Persona) -> BuiltPrompt:
    """Build a prompt that rewrites text to sound less machine-generated."""
    prompt = f"""{persona_prompt(persona)}
Review the following text. Your task is to rewrite it to sound more natural, engaging, and less like it was generated by an AI.

Focus on:
- Improving the flow and rhythm.
- Using more varied and dynamic vocabulary.
- Breaking up long sentences.
- Injecting more of the specified persona's voice and style.
- Correcting any awkward phrasing.

Do not change the core message or factual information. Only enhance the delivery.

Original Text:
---
{text}
---

Return only the rewritten text."""
    return BuiltPrompt(text=prompt, context="humanify text", grounded=False)


def build_topic_suggestions_prompt(
    generation_type: GenerationType,
    persona: Persona,
    existing: list[str],
    current_topic: str = "",
) -> BuiltPrompt:
    """Build a prompt asking for five new topic ideas as a JSON array of strings."""
    existing_list = "\n".join(f"- {suggestion}" for suggestion in existing)
    if current_topic.strip():
        topic_context = (
            f"The user's current topic is '{current_topic}'. "
            "The new suggestions should be related but distinct."
        )
    else:
        topic_context = (
            "The user has not entered a topic yet. "
            "The suggestions should be general and inspiring for this category."
        )

    prompt = f"""{persona_prompt(persona)}. You are an AI assistant tasked with brainstorming content topics.
The user wants to generate content of type '{generation_type.value}'.
{topic_context}

Here are some suggestions that have already been shown to the user:
{existing_list}

Please generate a list of 5 *new and unique* topic ideas that are distinct from the ones already listed. The topics should be specific, engaging, and suitable for the selected content type and persona.

Return *only* a JSON array of strings in your response, like this:
["Topic Idea 1", "Topic Idea 2", "Topic Idea 3", "Topic Idea 4", "Topic Idea 5"]"""
    return BuiltPrompt(text=prompt, context="get topic suggestions", grounded=False)


def build_company_suggestions_prompt(
    role: str,
    existing: list[CompanySuggestion],
) -> BuiltPrompt:
    """Build a prompt asking for five new companies as a JSON array of objects."""
    existing_list = "\n".join(f"- {company.name} ({company.industry})" for company in existing)

    prompt = f"""You are a career advisor AI. A user is looking for companies hiring for a role related to '{role}'.

Here are some companies already suggested:
{existing_list}

Brainstorm a list of 5 *new and unique* companies that are likely to hire for this role. For each company, identify its primary industry from this list: 'Big Tech', 'Healthcare', 'Consulting', or 'Other'.

Return *only* a JSON array of objects in your response, with the format:
[
    {{"name": "Company Name 1", "industry": "Industry 1"}},
    {{"name": "Company Name 2", "industry": "Industry 2"}}
]"""
    return BuiltPrompt(text=prompt, context="get company suggestions", grounded=False)


def with_prior_context(prompt: str, chunks: list[str]) -> str:
    """
    Append previously generated content to a prompt.

    Returns the prompt unchanged when there is nothing to add.
    """
    if not chunks:
        return prompt

    context_text = "\n\n---\n\n".join(chunks)
    return f"""{prompt}

## Previously generated content
The following excerpts come from content generated earlier in this session. Stay consistent with them where relevant and avoid repeating them verbatim.

{context_text}"""
