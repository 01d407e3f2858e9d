import gradio as gr
from functools import partial

from skill_converter.config import configure_logging, load_settings
from skill_converter.handlers import clear_log_handler, convert_skill_handler, refresh_log_handler
from skill_converter.log_panel import EventCollector

settings = load_settings()
collector = EventCollector(level=settings.log_level)
configure_logging(settings).addHandler(collector)

# --- UI Definition ---
with gr.Blocks(title=settings.window_title) as demo:
    gr.Markdown(f"# {settings.window_title}")
    gr.Markdown("Upload a Skill JSON file and convert it into a single CSV row.")

    with gr.Row():
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload Skill JSON", file_types=[".json"])
            include_maps = gr.Checkbox(
                label="Include proficiency levels and debuffs",
                value=settings.include_maps,
            )
            output_dir = gr.State(value=settings.output_dir)
            convert_btn = gr.Button("Convert to CSV", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)
            download_output = gr.File(label="Download Result")

        with gr.Column(scale=1):
            gr.Markdown("### 2. Log")
            log_box = gr.Textbox(label="Events", lines=18, max_lines=18, interactive=False)
            with gr.Row():
                refresh_log_btn = gr.Button("Refresh")
                clear_log_btn = gr.Button("Clear")

    gr.Markdown("### 3. Preview")
    row_preview = gr.Dataframe(label="CSV Row", interactive=False, wrap=True)

    convert_btn.click(
        fn=partial(convert_skill_handler, collector=collector, log_limit=settings.log_limit),
        inputs=[file_input, include_maps, output_dir],
        outputs=[download_output, status_msg, row_preview, log_box],
    )

    refresh_log_btn.click(
        fn=partial(refresh_log_handler, collector, settings.log_limit),
        inputs=[],
        outputs=[log_box],
    )

    clear_log_btn.click(
        fn=partial(clear_log_handler, collector),
        inputs=[],
        outputs=[log_box],
    )

if __name__ == "__main__":
    demo.launch()
