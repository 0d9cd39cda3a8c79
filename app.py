import logging

import gradio as gr

from json_inspector.handlers import (
    SETTINGS,
    load_file_handler,
    minify_handler,
    prettify_handler,
    search_handler,
    validate_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Inspector") as demo:
    gr.Markdown("# JSON Inspector")
    gr.Markdown("Paste or upload JSON to format it, locate syntax errors, and search its tree.")

    with gr.Tab("JSON"):
        with gr.Row():
            # Left Panel: Input
            with gr.Column(scale=1):
                gr.Markdown("### 1. Input")
                file_input = gr.File(label="Upload JSON File", file_types=[".json"])
                json_input = gr.Code(label="JSON", language="json", lines=20, interactive=True)
                status_msg = gr.Textbox(label="Status", interactive=False, lines=3)

            # Right Panel: Tools
            with gr.Column(scale=1):
                gr.Markdown("### 2. Format")
                sort_keys = gr.Checkbox(label="Sort keys", value=False)
                with gr.Row():
                    prettify_btn = gr.Button("Prettify", variant="primary")
                    minify_btn = gr.Button("Minify")
                    validate_btn = gr.Button("Validate")
                balance_report = gr.JSON(label="Bracket Balance")

                gr.Markdown("### 3. Search")
                search_box = gr.Textbox(label="Search keys and values", placeholder="name")
                tree_view = gr.Textbox(label="Tree", interactive=False, lines=15)
                match_paths = gr.Dataframe(
                    headers=["Path"],
                    datatype=["str"],
                    col_count=(1, "fixed"),
                    interactive=False,
                    label="Matching Paths",
                )

        file_input.upload(
            fn=load_file_handler,
            inputs=[file_input],
            outputs=[json_input, status_msg],
        )

        prettify_btn.click(
            fn=prettify_handler,
            inputs=[json_input, sort_keys],
            outputs=[json_input, status_msg],
        )

        minify_btn.click(
            fn=minify_handler,
            inputs=[json_input],
            outputs=[json_input, status_msg],
        )

        validate_btn.click(
            fn=validate_handler,
            inputs=[json_input],
            outputs=[status_msg, balance_report],
        )

        search_box.submit(
            fn=search_handler,
            inputs=[json_input, search_box],
            outputs=[tree_view, match_paths, status_msg],
        )

if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, SETTINGS.log_level, logging.INFO))
    demo.launch()
