from .frame_updates import merge_frame_updates, apply_to_context, build_batch_command
