"""
Tests for the Agent Workflow
"""

from dataclasses import replace

import pytest

from core.creation_studio.exceptions import NoProvidersConfiguredError, ProviderError
from core.creation_studio.generation import ResilientGenerator
from core.creation_studio.models import (
    AgentRole,
    BlockSummary,
    BlockType,
    Blueprint,
    ChapterSuggestion,
    LogStatus,
    ProjectSnapshot,
    StructureSuggestion,
    SynthesisOutline,
    Vendor,
    WorkflowTask,
)
from core.creation_studio.pipeline import AgentWorkflow, is_chapter_task
from core.creation_studio.prompts.visionary_prompts import VISIONARY_SYSTEM_PROMPT

from conftest import FakeProvider, StudioResponder, make_registry


def make_workflow(responder, studio_config):
    provider = FakeProvider(Vendor.MISTRAL, default=responder)
    return AgentWorkflow(ResilientGenerator(make_registry(provider), config=studio_config))


def messages(entries, agent=None, status=None):
    return [
        e.message for e in entries
        if (agent is None or e.agent == agent) and (status is None or e.status == status)
    ]


class TestChapterDetection:

    def test_description_mentions_chapter(self):
        assert is_chapter_task(WorkflowTask(role="WRITER", description="Write Chapter 3"))

    def test_title_mentions_chapter(self):
        task = WorkflowTask(role="WRITER", description="The storm arrives", title="CHAPTER 2")
        assert is_chapter_task(task)

    def test_plain_section(self):
        assert not is_chapter_task(WorkflowTask(role="WRITER", description="Write the blurb"))


class TestGeneratedPlan:
    """Runs where the architect plans the work"""

    @pytest.mark.asyncio
    async def test_single_chapter_run(self, generator, responder, empty_project):
        entries = []
        workflow = AgentWorkflow(generator)

        drafts = await workflow.run("Write a noir opening", empty_project, on_log=entries.append)

        assert len(drafts) == 1
        draft = drafts[0]
        assert draft.content == "It was a dark and stormy night."
        assert draft.block_type == BlockType.CHAPTER
        assert draft.chapter_number == 1
        assert draft.vendor_used == "mistral"
        assert draft.helper_script == "Slow build"
        assert draft.title == "Chapter 1"
        assert draft.prompt == "Write Chapter 1: The Beginning"

        assert entries[0].agent == AgentRole.PROJECT_MANAGER
        assert entries[0].message == "Initiating Parallel Planning Phase..."
        assert "Plan created with 1 tasks." in messages(entries, AgentRole.ARCHITECT, LogStatus.SUCCESS)
        assert "Style guide established." in messages(entries, AgentRole.VISIONARY, LogStatus.SUCCESS)
        assert "Drafting content complete." in messages(entries, AgentRole.WRITER, LogStatus.SUCCESS)
        assert "Quality: Approved" in messages(entries, AgentRole.CRITIC)
        assert "World Consistency Verified" in messages(entries, AgentRole.CONSISTENCY_CHECKER)

    @pytest.mark.asyncio
    async def test_planning_prompt_carries_project_context(self, generator, responder):
        project = ProjectSnapshot(
            title="Ongoing",
            blocks=[BlockSummary(type=BlockType.CHAPTER, content="The harbor was silent " * 10)],
        )
        workflow = AgentWorkflow(generator)

        await workflow.run("Continue the story", project)

        planning_prompt = responder.calls_for("architect")[0][1]
        assert "[chapter] The harbor was silent The harbor was silent The ha..." in planning_prompt
        assert planning_prompt.endswith("User Request: Continue the story")
        assert responder.calls_for("visionary")[0][1] == planning_prompt

    @pytest.mark.asyncio
    async def test_style_guide_reaches_writer(self, generator, responder, empty_project):
        workflow = AgentWorkflow(generator)

        await workflow.run("Write", empty_project)

        writer_prompt = responder.calls_for("writer")[0][1]
        assert "VISUAL STYLE: Muted noir" in writer_prompt
        assert "SENSORY PALETTE: Rain, neon, smoke" in writer_prompt
        assert "Script: Open strong" in writer_prompt

    @pytest.mark.asyncio
    async def test_chapter_numbers_skip_non_chapters(self, studio_config, empty_project):
        responder = StudioResponder(tasks=[
            {"role": "WRITER", "description": "Write Chapter 1"},
            {"role": "WRITER", "description": "Write the back-cover blurb"},
            {"role": "WRITER", "description": "Write Chapter 2"},
        ])
        workflow = make_workflow(responder, studio_config)

        drafts = await workflow.run("Write", empty_project)

        assert [d.chapter_number for d in drafts] == [1, None, 2]
        assert [d.block_type for d in drafts] == [BlockType.CHAPTER, BlockType.TEXT, BlockType.CHAPTER]

    @pytest.mark.asyncio
    async def test_empty_plan_fails_the_run(self, studio_config, empty_project):
        responder = StudioResponder(tasks=[])
        entries = []
        workflow = make_workflow(responder, studio_config)

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert drafts == []
        assert messages(entries, AgentRole.ARCHITECT, LogStatus.FAILED) == ["Failed to generate a valid plan."]
        assert responder.calls_for("writer") == []

    @pytest.mark.asyncio
    async def test_architect_vendor_failure_fails_the_run(self, studio_config, empty_project):
        provider = FakeProvider(Vendor.MISTRAL, default=ProviderError("mistral", "Mistral AI API error (500): down"))
        workflow = AgentWorkflow(ResilientGenerator(make_registry(provider), config=studio_config))
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert drafts == []
        assert "Failed to generate a valid plan." in messages(entries, AgentRole.ARCHITECT, LogStatus.FAILED)

    @pytest.mark.asyncio
    async def test_visionary_failure_is_not_fatal(self, studio_config, empty_project):
        responder = StudioResponder()

        def answer(prompt, options):
            if options and options.system_prompt == VISIONARY_SYSTEM_PROMPT:
                raise ProviderError("mistral", "Mistral AI API error (500): visionary down")
            return responder(prompt, options)

        workflow = make_workflow(answer, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert len(drafts) == 1
        assert "Style guide unavailable." in messages(entries, AgentRole.VISIONARY, LogStatus.WARNING)
        writer_prompt = responder.calls_for("writer")[0][1]
        assert "VISUAL STYLE" not in writer_prompt

    @pytest.mark.asyncio
    async def test_no_vendor_configured_propagates(self, studio_config, empty_project):
        provider = FakeProvider(Vendor.MISTRAL, default="never", configured=False)
        workflow = AgentWorkflow(ResilientGenerator(make_registry(provider), config=studio_config))
        entries = []

        with pytest.raises(NoProvidersConfiguredError):
            await workflow.run("Write", empty_project, on_log=entries.append)

        assert messages(entries, AgentRole.PROJECT_MANAGER, LogStatus.FAILED)
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_non_writer_tasks_are_skipped(self, studio_config, empty_project):
        responder = StudioResponder(tasks=[
            {"role": "VISIONARY", "description": "Design the cover"},
            {"role": "WRITER", "description": "Write Chapter 1"},
        ])
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert len(drafts) == 1
        assert "No executor for role VISIONARY; task skipped." in messages(
            entries, AgentRole.PROJECT_MANAGER, LogStatus.WARNING
        )

    @pytest.mark.asyncio
    async def test_unknown_role_is_skipped(self, studio_config, empty_project):
        responder = StudioResponder(tasks=[
            {"role": "ILLUSTRATOR", "description": "Draw a map"},
            {"role": "WRITER", "description": "Write Chapter 1"},
        ])
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert len(drafts) == 1
        thinking = [e for e in entries if e.message == "Executing: Draw a map"]
        assert thinking[0].agent == AgentRole.PROJECT_MANAGER


class TestExecution:
    """Writer loop behavior"""

    @pytest.mark.asyncio
    async def test_empty_content_is_skipped(self, studio_config, empty_project):
        responder = StudioResponder(
            tasks=[
                {"role": "WRITER", "description": "Write Chapter 1"},
                {"role": "WRITER", "description": "Write Chapter 2"},
            ],
            writer_outputs=[{"content": ""}, {"content": "Second chapter text"}],
        )
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert [d.content for d in drafts] == ["Second chapter text"]
        assert drafts[0].chapter_number == 1
        assert messages(entries, AgentRole.WRITER, LogStatus.FAILED) == ["Failed to generate content."]
        # Skipped drafts are never validated
        assert len(responder.calls_for("critic")) == 1

    @pytest.mark.asyncio
    async def test_blank_content_is_skipped(self, studio_config, empty_project):
        responder = StudioResponder(writer_outputs=[{"content": "   \n  "}])
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert drafts == []
        assert messages(entries, AgentRole.WRITER, LogStatus.FAILED) == ["Failed to generate content."]
        assert responder.calls_for("critic") == []

    @pytest.mark.asyncio
    async def test_unparseable_writer_output_is_skipped(self, studio_config, empty_project):
        responder = StudioResponder(writer_outputs=["this is not json"])
        workflow = make_workflow(responder, studio_config)

        assert await workflow.run("Write", empty_project) == []

    @pytest.mark.asyncio
    async def test_paragraph_list_is_joined(self, studio_config, empty_project):
        responder = StudioResponder(writer_outputs=[{"content": ["First.", "Second."]}])
        workflow = make_workflow(responder, studio_config)

        drafts = await workflow.run("Write", empty_project)

        assert drafts[0].content == "First.\nSecond."

    @pytest.mark.asyncio
    async def test_failure_keeps_partial_progress(self, studio_config, empty_project):
        responder = StudioResponder(
            tasks=[
                {"role": "WRITER", "description": "Write Chapter 1"},
                {"role": "WRITER", "description": "Write Chapter 2"},
                {"role": "WRITER", "description": "Write Chapter 3"},
            ],
            writer_outputs=[
                {"content": "One"},
                ProviderError("mistral", "Mistral AI API error (500): down"),
                ProviderError("mistral", "Mistral AI API error (500): still down"),
            ],
        )
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert [d.content for d in drafts] == ["One"]
        assert messages(entries, AgentRole.PROJECT_MANAGER, LogStatus.FAILED) == [
            "Workflow encountered an error."
        ]
        # Chapter 3 never started
        assert "Executing: Write Chapter 3" not in messages(entries)

    @pytest.mark.asyncio
    async def test_validation_is_advisory(self, studio_config, empty_project):
        responder = StudioResponder(
            critic={"approved": False, "critique": "Too slow"},
            consistency={"status": "fail", "issues": ["Lighthouse is red, not white", "Logbook missing"]},
        )
        workflow = make_workflow(responder, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert drafts[0].content == "It was a dark and stormy night."
        assert "Quality: Needs Polish" in messages(entries, AgentRole.CRITIC, LogStatus.SUCCESS)
        issues = [e for e in entries if e.message == "Consistency Issues Found"]
        assert issues[0].status == LogStatus.WARNING
        assert issues[0].metadata == "Lighthouse is red, not white, Logbook missing"

    @pytest.mark.asyncio
    async def test_validation_failure_is_a_warning(self, studio_config, empty_project):
        responder = StudioResponder()

        def answer(prompt, options):
            if options and "Continuity Editor" in (options.system_prompt or ""):
                raise ProviderError("mistral", "Mistral AI API error (500): checker down")
            return responder(prompt, options)

        workflow = make_workflow(answer, studio_config)
        entries = []

        drafts = await workflow.run("Write", empty_project, on_log=entries.append)

        assert len(drafts) == 1
        assert "Consistency check unavailable." in messages(
            entries, AgentRole.CONSISTENCY_CHECKER, LogStatus.WARNING
        )

    @pytest.mark.asyncio
    async def test_critic_sees_excerpt(self, studio_config, empty_project):
        responder = StudioResponder(writer_outputs=[{"content": "x" * 3000}])
        workflow = make_workflow(responder, studio_config)

        await workflow.run("Write", empty_project)

        critic_prompt = responder.calls_for("critic")[0][1]
        assert critic_prompt.endswith("x" * studio_config.critic_excerpt_chars + "...")
        consistency_prompt = responder.calls_for("consistency")[0][1]
        assert len(consistency_prompt) == studio_config.consistency_excerpt_chars

    @pytest.mark.asyncio
    async def test_callback_errors_do_not_stop_the_run(self, generator, empty_project):
        def broken(entry):
            raise RuntimeError("UI went away")

        drafts = await AgentWorkflow(generator).run("Write", empty_project, on_log=broken)

        assert len(drafts) == 1


class TestApprovedOutline:
    """Runs seeded by a blueprint or synthesis outline"""

    @pytest.mark.asyncio
    async def test_blueprint_skips_planning_calls(self, generator, responder, sample_blueprint):
        project = ProjectSnapshot(title="Storm", blueprint=sample_blueprint)
        entries = []

        drafts = await AgentWorkflow(generator).run("ignored", project, on_log=entries.append)

        assert responder.calls_for("architect") == []
        assert responder.calls_for("visionary") == []
        assert "Using approved blueprint plan." in messages(entries, AgentRole.ARCHITECT, LogStatus.SUCCESS)
        # Scene sections are not turned into tasks
        assert [d.title for d in drafts] == ["Chapter 1: Arrival", "Chapter 2: The Storm"]
        assert [d.chapter_number for d in drafts] == [1, 2]
        assert drafts[0].prompt == "Write Chapter 1: Arrival. The keeper arrives."

    @pytest.mark.asyncio
    async def test_blueprint_world_reaches_agents(self, generator, responder, sample_blueprint):
        project = ProjectSnapshot(title="Storm", blueprint=sample_blueprint)

        await AgentWorkflow(generator).run("ignored", project)

        writer_prompt = responder.calls_for("writer")[0][1]
        assert "Tone: Brooding" in writer_prompt
        assert "- Ada (Protagonist): Keeper [Traits: stubborn, kind]" in writer_prompt
        assert "- Lighthouse: Stone tower [Sensory: Salt and diesel]" in writer_prompt
        assert "Script: Genre: Mystery, Tone: Brooding. Structure this as a chapter." in writer_prompt

        consistency_system = responder.calls_for("consistency")[0][2].system_prompt
        assert "- Logbook: Water-stained [Usage: Records every ship]" in consistency_system

    @pytest.mark.asyncio
    async def test_blueprint_without_chapters_fails(self, generator, empty_project):
        blueprint = Blueprint(title="Empty")
        entries = []

        drafts = await AgentWorkflow(generator).run(
            "Write", empty_project, on_log=entries.append, approved_outline=blueprint,
        )

        assert drafts == []
        assert messages(entries, AgentRole.ARCHITECT, LogStatus.FAILED) == [
            "Approved blueprint has no chapter sections."
        ]

    @pytest.mark.asyncio
    async def test_synthesis_outline_round_trip(self, generator, responder, empty_project):
        outline = SynthesisOutline(
            summary="Two sisters inherit a vineyard",
            context_summary="Two sisters inherit a vineyard",
            suggested_structure=StructureSuggestion(
                title="Harvest",
                genre="Drama",
                tone="Warm",
                chapters=[
                    ChapterSuggestion(number=1, title="Chapter 1: The Will", summary="The reading."),
                    ChapterSuggestion(number=2, title="Chapter 2: First Frost", summary="A bad night."),
                ],
            ),
        )

        drafts = await AgentWorkflow(generator).run("Write", empty_project, approved_outline=outline)

        assert responder.calls_for("architect") == []
        assert [d.title for d in drafts] == ["Chapter 1: The Will", "Chapter 2: First Frost"]
        assert "Tone: Warm" in responder.calls_for("writer")[0][1]

    @pytest.mark.asyncio
    async def test_approved_outline_wins_over_project_blueprint(self, generator, sample_blueprint):
        project = ProjectSnapshot(title="Storm", blueprint=sample_blueprint)
        approved = Blueprint(title="Other", sections=[sample_blueprint.sections[0]])

        drafts = await AgentWorkflow(generator).run("Write", project, approved_outline=approved)

        assert [d.title for d in drafts] == ["Chapter 1: Arrival"]


class TestPersonas:

    @pytest.mark.asyncio
    async def test_persona_is_applied(self, generator, responder, sample_blueprint):
        project = ProjectSnapshot(
            title="Storm",
            blueprint=replace(sample_blueprint, persona_id="noir_detective"),
        )
        entries = []

        await AgentWorkflow(generator).run("Write", project, on_log=entries.append)

        assert "Applying Agent Persona: Noir Detective" in messages(
            entries, AgentRole.PROJECT_MANAGER, LogStatus.SUCCESS
        )
        system_prompt = responder.calls_for("writer")[0][2].system_prompt
        assert "IMPORTANT - ADOPT THIS PERSONA:" in system_prompt
        assert "Crime Noir Author" in system_prompt

    @pytest.mark.asyncio
    async def test_default_persona_is_not_announced(self, generator, empty_project):
        entries = []

        await AgentWorkflow(generator).run("Write", empty_project, on_log=entries.append)

        assert not [m for m in messages(entries) if m.startswith("Applying Agent Persona")]

    @pytest.mark.asyncio
    async def test_project_persona_survives_approved_blueprint(self, generator, responder, sample_blueprint):
        project = ProjectSnapshot(title="Storm", blueprint=replace(sample_blueprint, persona_id="horror_maestro"))
        approved = Blueprint(title="Approved", sections=[sample_blueprint.sections[0]])

        await AgentWorkflow(generator).run("Write", project, approved_outline=approved)

        assert "Horror Author" in responder.calls_for("writer")[0][2].system_prompt
        assert approved.persona_id is None
